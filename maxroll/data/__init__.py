import os
import json


def get_data(data_name):
    this_file = os.path.abspath(__file__)
    this_dir = os.path.dirname(this_file)
    data_file = os.path.join(this_dir, data_name)
    with open(data_file, encoding='utf-8') as fp:
        return json.load(fp)


def load_config():
    """Bundles the maxroll keyword tables into the dict the engine expects.

    Another site gets its own version of this dict, nothing in universal/
    knows about maxroll.
    """
    hierarchy = get_data("hierarchy.json")
    return {
        'boss_keywords': get_data("boss_keywords.json"),
        'section_groups': get_data("section_keywords.json"),
        'ability': get_data("ability_keywords.json"),
        'variant_marker': hierarchy['variant_marker'],
        'strategy_keywords': hierarchy['strategy_keywords'],
        'title_separators': hierarchy['title_separators'],
        'title_suffixes': hierarchy['title_suffixes'],
        'urls': get_data("section_mapping.json"),
    }
