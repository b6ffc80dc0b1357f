echo('<!doctype html>\n<html>\n<head>\n')
echo('  <title>', yield_('title', 'Untitled'), '</title>\n')
echo('  <link rel="stylesheet" href="', asset('css/app.css'), '">\n')
echo(yield_('head'))
echo('</head>\n<body>\n')
echo(partial('partials.nav'))
echo(content)
echo(yield_('scripts'))
echo('</body>\n</html>\n')
