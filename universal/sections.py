from universal.utils import find_list

SECTION_TAGS = [
    'introduction',
    'mechanics',
    'fightProgression',
    'advancedStrategy',
    'summary',
    'footer'
]

GENERAL = 'general'
ABILITY = 'ability'


def empty_sections():
    return dict([(tag, []) for tag in SECTION_TAGS])


def categorize_heading(text, groups):
    """Maps a heading onto one of the fixed section tags.

    groups is an ordered list of ``[tag, [keyword, ...]]``. The first group
    with a keyword inside the lower cased heading wins; nothing matching
    gives ``general``.
    """
    lowered = (text or '').lower()
    for tag, keywords in groups:
        assert tag in SECTION_TAGS, "Unknown section tag: %s" % tag
        for keyword in keywords:
            if keyword.lower() in lowered:
                return tag
    return GENERAL


def classify_ability_heading(text, ability_config):
    lowered = (text or '').strip().lower()
    if not lowered:
        return GENERAL
    if _contains_any(lowered, ability_config['general_keywords']):
        return GENERAL
    if _contains_any(lowered, ability_config['ability_keywords']):
        return ABILITY
    if len(lowered) < ability_config['max_default_length'] and \
            not _contains_any(lowered, ability_config['default_reject']):
        return ABILITY
    return GENERAL


def is_strategy_heading(text, keywords):
    return _contains_any((text or '').lower(), keywords)


def _contains_any(lowered, keywords):
    return find_list(lowered, [k.lower() for k in keywords]) is not False
