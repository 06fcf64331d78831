"""Input normalization.

Crawled pages arrive in one of three shapes:

* ``contentBlocks``: already chunked ``{heading, content}`` pairs
* ``content`` as a list of typed nodes (heading, paragraph, list,
  blockquote, figcaption) in document order
* ``content`` as the legacy ``{headings, paragraphs}`` object, which lost the
  interleaving of headings and text

normalize_page resolves the shape once and hands back a canonical dict tagged
with ``format`` so nothing downstream has to probe the raw record again.
"""
from universal.errors import PageSkipped
from universal.markdown import markdown_text
from universal.utils import recursive_filter_entities

NODE_TYPES = ['heading', 'paragraph', 'list', 'blockquote', 'figcaption']


def normalize_page(page):
    if not isinstance(page, dict):
        raise PageSkipped("Page is not an object: %r" % (page,))
    blocks = page.get('contentBlocks')
    if isinstance(blocks, list) and len(blocks) > 0:
        return {'format': 'blocks', 'blocks': normalize_blocks(blocks)}
    content = page.get('content')
    if isinstance(content, list):
        return {'format': 'nodes', 'nodes': normalize_nodes(content)}
    if isinstance(content, dict) and 'headings' in content and 'paragraphs' in content:
        return normalize_legacy(content)
    return {'format': 'empty'}


def normalize_blocks(blocks):
    retblocks = []
    for block in blocks:
        if not isinstance(block, dict):
            continue
        retblocks.append(build_block(
            str(block.get('heading') or ''), str(block.get('content') or '')))
    return recursive_filter_entities(retblocks)


def normalize_nodes(content):
    nodes = []
    for item in content:
        if not isinstance(item, dict):
            continue
        node = normalize_node(item)
        if node:
            nodes.append(node)
    return nodes


def normalize_node(item):
    ntype = item.get('type')
    if ntype not in NODE_TYPES:
        return None
    if ntype == 'heading':
        return build_heading(item.get('level'), markdown_text(item.get('text')))
    if ntype == 'list':
        items = [markdown_text(i) for i in _as_list(item.get('items'))]
        return {
            'type': 'list',
            'items': [i for i in items if i],
            'list_type': item.get('list_type') or item.get('kind') or 'ul'
        }
    return {'type': ntype, 'text': markdown_text(item.get('text'))}


def normalize_legacy(content):
    headings = []
    for heading in _as_list(content.get('headings')):
        if isinstance(heading, dict):
            headings.append(build_heading(
                heading.get('level'), markdown_text(heading.get('text'))))
        else:
            headings.append(build_heading(None, markdown_text(heading)))
    paragraphs = [markdown_text(p) for p in _as_list(content.get('paragraphs'))]
    return {
        'format': 'legacy',
        'headings': headings,
        'paragraphs': [p for p in paragraphs if p]
    }


def build_heading(level, text):
    return {'type': 'heading', 'level': parse_level(level), 'text': text}


def build_block(heading, content):
    return {'heading': heading, 'content': content}


def parse_level(level):
    # Unknown levels sort below everything the page declares
    try:
        return max(1, int(level))
    except (TypeError, ValueError):
        return 6


def format_node(node):
    ntype = node['type']
    if ntype == 'paragraph':
        return node['text']
    elif ntype == 'list':
        return ', '.join(node['items'])
    elif ntype == 'blockquote':
        return '"%s"' % node['text'] if node['text'] else ''
    elif ntype == 'figcaption':
        return 'Caption: %s' % node['text'] if node['text'] else ''
    assert False, "Not a body node: %s" % node


def is_heading(node):
    return node['type'] == 'heading'


def _as_list(value):
    # crawler output is loose, a lone value stands for a one item list
    if isinstance(value, list):
        return value
    if value is None or value == '':
        return []
    return [value]
