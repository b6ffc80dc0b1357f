echo('<nav>')
for label, href in params.get('links', []):
    echo('<a href="', e(href), '">', e(label), '</a>')
echo('</nav>\n')

start('scripts')
echo('<script src="', asset('js/nav.js'), '"></script>\n')
end()
