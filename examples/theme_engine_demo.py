#!/usr/bin/env python3
"""
Theme engine demo

Renders ``pages.home`` from the bundled ``themes/default`` theme: the page
extends a layout, fills the ``title`` and ``scripts`` blocks and the layout
pulls in a navigation partial.
"""

import logging
from pathlib import Path

import themeengine
from themeengine.log import configure_logging


def main():
    configure_logging('DEBUG')
    logging.getLogger(__name__).info("Rendering demo page")

    themes = Path(__file__).parent / 'themes'
    themeengine.init(themes, 'default', {'cache': True})

    html = themeengine.render('pages.home', {
        'title': 'Fish & Chips',
        'intro': 'Served <hot>',
        'links': [('Home', '/'), ('About', '/about?a=1&b=2')],
    }, request={'HTTP_HOST': 'localhost:8000', 'SCRIPT_NAME': '/index.py'})
    print(html)


if __name__ == '__main__':
    main()
