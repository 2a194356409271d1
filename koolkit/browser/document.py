"""
Document Module
Adds style and script elements to an HTML document.
"""

from typing import Callable, List, Optional

from bs4 import BeautifulSoup, Tag


def _get_head(document: BeautifulSoup) -> Tag:
    """Return the document <head>, creating it if the markup has none."""
    head = document.head
    if head is not None:
        return head

    head = document.new_tag('head')
    html = document.html
    if html is not None:
        html.insert(0, head)
    else:
        document.insert(0, head)
    return head


def inject_css(document: BeautifulSoup, css: str) -> Tag:
    """
    Inject the given CSS into the document.

    Args:
        document: Parsed HTML document
        css: CSS source

    Returns:
        Tag: The newly created <style> element
    """
    style = document.new_tag('style', type='text/css')
    style.string = css
    _get_head(document).append(style)
    return style


def load_scripts(
    document: BeautifulSoup,
    files: List[str],
    done: Optional[Callable[[List[Tag]], object]] = None
) -> List[Tag]:
    """
    Add async <script> elements for the given files to the document head.

    Args:
        document: Parsed HTML document
        files: Script URLs, in load order
        done: Called with the list of script elements once all are added

    Returns:
        list[Tag]: The new <script> elements
    """
    head = _get_head(document)

    scripts = []
    for file in files:
        script = document.new_tag('script', type='text/javascript', src=file)
        script['async'] = ''
        head.append(script)
        scripts.append(script)

    if done is not None:
        done(scripts)

    return scripts
