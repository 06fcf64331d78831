from maxroll.data import get_data


def is_boss_page(page, keywords=None):
    if keywords is None:
        keywords = get_data("boss_keywords.json")
    title = str(page.get('title') or '').lower()
    url = str(page.get('url') or '').lower()
    for keyword in keywords:
        keyword = keyword.lower()
        if keyword in title or keyword in url:
            return True
    return False
