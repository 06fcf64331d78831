from urllib.parse import urlparse, parse_qs
from universal.files import char_replace
from maxroll.data import get_data


def url_to_folder_and_slug(url, mapping=None):
    if mapping is None:
        mapping = get_data("section_mapping.json")
    o = urlparse(str(url or ''))
    parts = [p for p in o.path.split('/') if p]
    return get_target_folder(parts, mapping), extract_slug(parts, o.query, mapping)


def get_target_folder(parts, mapping):
    anchor = mapping['anchor']
    if anchor not in parts:
        return mapping['default_folder']
    index = parts.index(anchor)
    if index + 1 >= len(parts):
        return mapping['default_folder']
    return mapping['sections'].get(parts[index + 1], mapping['default_folder'])


def extract_slug(parts, query, mapping):
    anchor = mapping['anchor']
    if parts == [anchor]:
        return mapping['home_slug']
    if anchor not in parts:
        return mapping['unknown_slug']
    index = parts.index(anchor)
    if index + 2 < len(parts):
        slug = parts[index + 2]
    elif index + 1 < len(parts):
        slug = parts[index + 1]
    else:
        return mapping['unknown_slug']
    filters = decode_filters(query, mapping['filters'])
    if filters:
        slug = "%s-%s" % (slug, filters)
    return slug


def decode_filters(query, filters):
    """Turns the list filters maxroll puts in the query into a slug suffix.

    ``filter[classes][value]=d4-barbarian`` becomes ``barbarian``; several
    filters are joined with hyphens in the order they are configured.
    """
    if not query:
        return ''
    q = parse_qs(query)
    values = []
    for param, prefix in filters:
        for value in q.get(param, [])[:1]:
            if prefix and value.startswith(prefix):
                value = value[len(prefix):]
            value = char_replace(value)
            if value:
                values.append(value)
    return '-'.join(values)
