# Module for filling the static page templates

import html
import os
from string import Template

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8" />
<title>$title</title>
$stylesheets
</head>
<body>
<div style="margin-top: 120px">

<div id="page-content-main">
$page_content
</div><!-- id="page-content-main" -->

<div style="margin-left: auto; margin-right: auto; margin-top:20px; width:960px; height:100px; font-size:32px">
  <div style="width:33%; float:left; text-align: left">
    $prev
  </div>
  <div style="width:33%; float:left; text-align: center">
    <a href="./$toc_filename">Table of Content</a>
  </div>
  <div style="width:33%; float: right; text-align: right">
    $next
  </div>
</div>

</div>
</body>
</html>
""")

TOC_TEMPLATE = Template("""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8" />
<title>$book_title: Table Of Content</title>
</head>
<body>
<div style="margin-left:auto; margin-right:auto; margin-top:80px; margin-bottom:40px;">
$toc_list
</div>
</body>
</html>
""")

STYLESHEET_LINK = '<link rel="stylesheet" type="text/css" href="./css/{}" />'


def stylesheet_names(stylesheet_urls):
    """Local file names of the cached stylesheets, in configured order."""
    return [os.path.basename(url) for url in stylesheet_urls]


def render_page(title, page_content, prev_html, next_html, stylesheets, toc_filename="_toc.html"):
    """Composes one mirrored page. `title` is plain text and gets escaped."""
    return PAGE_TEMPLATE.substitute(
        title=html.escape(title),
        stylesheets="\n".join(STYLESHEET_LINK.format(name) for name in stylesheets),
        page_content=page_content,
        prev=prev_html,
        next=next_html,
        toc_filename=toc_filename,
    )


def render_toc_document(book_title, toc_list):
    return TOC_TEMPLATE.substitute(book_title=html.escape(book_title), toc_list=toc_list)
