from universal.nodes import build_block, format_node, is_heading
from universal.utils import join_fragments


def extract_blocks(canonical, title=None):
    fmt = canonical['format']
    if fmt == 'nodes':
        return nodes_to_blocks(canonical['nodes'], title)
    elif fmt == 'legacy':
        return legacy_to_blocks(canonical['headings'], canonical['paragraphs'], title)
    elif fmt == 'blocks':
        return list(canonical['blocks'])
    return []


def default_heading(title):
    if title and str(title).strip():
        return str(title).strip()
    return 'Content'


def heading_units(nodes, title=None):
    """Cuts a node sequence into one unit per heading.

    Each unit carries the heading text, its level and the formatted body
    that follows it up to the next heading. Text in front of the first
    heading becomes a level 0 unit named after the page, and only when there
    is any.
    """
    units = []
    curr = {'heading': default_heading(title), 'level': 0, 'parts': []}
    for node in nodes:
        if is_heading(node):
            if curr['level'] > 0 or curr['parts']:
                units.append(curr)
            curr = {'heading': node['text'], 'level': node['level'], 'parts': []}
        else:
            curr['parts'].append(format_node(node))
    if curr['level'] > 0 or curr['parts']:
        units.append(curr)
    for unit in units:
        unit['content'] = join_fragments(unit.pop('parts'))
    return units


def legacy_units(headings, paragraphs, title=None):
    # The legacy shape has no interleaving, every heading gets the whole text
    content = join_fragments(paragraphs)
    units = []
    for heading in headings:
        if not heading['text']:
            continue
        units.append({
            'heading': heading['text'],
            'level': heading['level'],
            'content': content
        })
    if not units and content:
        units.append({'heading': default_heading(title), 'level': 0, 'content': content})
    return units


def units_to_blocks(units):
    return [build_block(u['heading'], u['content']) for u in units if u['content']]


def nodes_to_blocks(nodes, title=None):
    return units_to_blocks(heading_units(nodes, title))


def legacy_to_blocks(headings, paragraphs, title=None):
    return units_to_blocks(legacy_units(headings, paragraphs, title))
