extend('layouts.main')

with block('title'):
    echo(e(title))

echo('<main>\n')
echo('  <h1>', e(title), '</h1>\n')
echo('  <p>', e(params.get('intro', '')), '</p>\n')
echo('</main>\n')

start('scripts')
echo('<script src="', asset('js/home.js'), '"></script>\n')
end()
