"""Boss page restructuring.

Boss pages on the wiki describe one or more variants of a boss (the Echo of
Lilith fight has two) and list their abilities and the strategies against
them under plain headings. This module turns that flat heading stream into

    {title, url, bossVersions, generalContent, sections}

in two passes. The first finds the variants from their captioned stat blocks.
The second walks the headings with a small cursor state (active version,
active ability) and decides for each heading who owns the text under it.
"""
import re
from universal.blocks import extract_blocks, heading_units, legacy_units
from universal.nodes import build_block
from universal.sections import categorize_heading, classify_ability_heading
from universal.sections import is_strategy_heading, empty_sections
from universal.sections import ABILITY, GENERAL
from universal.utils import join_fragments

STATS_PRESENT = re.compile(r'\blevel\s*:.*?\bhp\s*:', re.I | re.S)
LEVEL_STAT = re.compile(r'\blevel\s*:\s*~?\s*(\d[\d,]*)', re.I)
HP_STAT = re.compile(r'(?<!stagger )\bhp\s*:\s*(~?\s*\d(?:[\d,.]*\d)?(?:\s*[kmb]\b)?)', re.I)
STAGGER_STAT = re.compile(r'\bstagger\s+hp\s*:\s*~?\s*(\d[\d,]*)', re.I)
LEVEL_LABEL = re.compile(r'\blevel\s*:', re.I)


def extract_hierarchy(canonical, title, url, config, external_strategies=False):
    model = build_model(title, url)
    fmt = canonical['format']
    if fmt == 'nodes':
        nodes = canonical['nodes']
        boss_name = infer_boss_name(title, config)
        for version in discover_versions(nodes, boss_name):
            model['bossVersions'].append(version)
        units = heading_units(nodes, title)
    elif fmt == 'legacy':
        units = legacy_units(canonical['headings'], canonical['paragraphs'], title)
    else:
        model['generalContent'] = extract_blocks(canonical, title)
        return model
    group_units(units, model, config, external_strategies)
    return model


def build_model(title, url):
    return {
        'title': title or '',
        'url': url or '',
        'bossVersions': [],
        'generalContent': [],
        'sections': empty_sections()
    }


def build_version(name, level=0, hp='', staggerHp=0):
    return {
        'name': name,
        'level': level,
        'hp': hp,
        'staggerHp': staggerHp,
        'abilities': []
    }


def build_ability(name, description, strategy=None):
    ability = {'name': name, 'description': description}
    if strategy is not None:
        ability['strategy'] = strategy
    return ability


def build_strategy(name, description):
    return {'name': name, 'description': description}


def infer_boss_name(title, config):
    name = title or ''
    for sep in config['title_separators']:
        name = name.split(sep)[0]
    name = name.strip()
    for suffix in config['title_suffixes']:
        if name.lower().endswith(suffix.lower()):
            name = name[:-len(suffix)].strip()
            break
    return name


def parse_stats(text):
    """Reads a ``Level: N ... HP: ~M ... Stagger HP: K`` line.

    Returns None when the text is not a stat line at all. Fields that are
    present but unreadable come back as 0 or an empty string.
    """
    if not STATS_PRESENT.search(text or ''):
        return None
    stats = {'level': 0, 'hp': '', 'staggerHp': 0}
    m = LEVEL_STAT.search(text)
    if m:
        stats['level'] = _parse_int(m.group(1))
    m = HP_STAT.search(text)
    if m:
        stats['hp'] = m.group(1).strip()
    m = STAGGER_STAT.search(text)
    if m:
        stats['staggerHp'] = _parse_int(m.group(1))
    return stats


def _parse_int(text):
    try:
        return int(text.replace(',', ''))
    except ValueError:
        return 0


def discover_versions(nodes, boss_name):
    # A caption naming the boss followed by its stat paragraph is a variant
    versions = []
    seen = set()
    pending = None
    if not boss_name:
        return versions
    for node in nodes:
        ntype = node['type']
        if ntype == 'figcaption':
            pending = None
            text = node['text']
            if boss_name.lower() in text.lower() and text not in seen:
                pending = text
        elif ntype == 'heading':
            pending = None
        elif ntype == 'paragraph' and pending:
            stats = parse_stats(node['text'])
            if stats is not None:
                versions.append(build_version(pending, **stats))
                seen.add(pending)
                pending = None
    return versions


def split_variants(content, marker):
    """Splits a body holding several captioned stat blocks into versions."""
    if not marker or content.count(marker) < 2:
        return []
    versions = []
    for part in content.split(marker)[1:]:
        stats = parse_stats(part)
        if stats is None:
            continue
        m = LEVEL_LABEL.search(part)
        name = part[:m.start()].strip().rstrip(':-–').strip()
        if name:
            versions.append(build_version(name, **stats))
    return versions


def find_version(model, name):
    name = (name or '').strip()
    for version in model['bossVersions']:
        if version['name'] == name:
            return version
    return None


def new_state():
    return {
        'version': None,
        'version_level': None,
        'ability': None,
        'ability_level': None
    }


def group_units(units, model, config, external_strategies=False):
    state = new_state()
    for unit in units:
        state = transition(state, unit, model, config, external_strategies)
    return finish(state)


def finish(state):
    return flush_ability(state)


def flush_ability(state):
    if state['ability'] is not None:
        state['version']['abilities'].append(state['ability'])
    return dict(state, ability=None, ability_level=None)


def route_unit(model, unit, groups):
    block = build_block(unit['heading'], unit['content'])
    tag = categorize_heading(unit['heading'], groups)
    if tag == GENERAL:
        model['generalContent'].append(block)
    else:
        model['sections'][tag].append(block)
    return tag


def transition(state, unit, model, config, external_strategies=False):
    """Moves the cursor over one heading unit and files its content.

    state holds the active version and ability. Abilities are only attached
    to their version when they are closed, so a version never shares an
    ability with another one.
    """
    heading = unit['heading']
    level = unit['level']
    content = unit['content']
    version = state['version']
    ability = state['ability']

    variants = split_variants(content, config['variant_marker'])
    if [v for v in variants if not find_version(model, v['name'])]:
        for variant in variants:
            if not find_version(model, variant['name']):
                model['bossVersions'].append(variant)
        route_unit(model, unit, config['section_groups'])
        state = flush_ability(state)
        return dict(state, version=find_version(model, variants[0]['name']),
                    version_level=level)

    match = find_version(model, heading)
    if match:
        state = flush_ability(state)
        return dict(state, version=match, version_level=level)

    if version is not None and is_strategy_heading(heading, config['strategy_keywords']):
        _attach_strategy(version, ability, heading, content, external_strategies)
        return state

    if ability is not None and level > state['ability_level']:
        ability['description'] = join_fragments([ability['description'], content])
        return state

    if version is not None and level >= state['version_level']:
        state = flush_ability(state)
        if classify_ability_heading(heading, config['ability']) == ABILITY:
            return dict(state, ability=build_ability(heading, content),
                        ability_level=level)
        route_unit(model, unit, config['section_groups'])
        return state

    flush_ability(state)
    route_unit(model, unit, config['section_groups'])
    return new_state()


def _attach_strategy(version, ability, heading, content, external_strategies):
    if external_strategies:
        version.setdefault('strategies', []).append(build_strategy(heading, content))
        return
    if ability is None and version['abilities']:
        ability = version['abilities'][-1]
    if ability is None:
        version['abilities'].append(build_ability(heading, '', strategy=content))
        return
    ability['strategy'] = join_fragments([ability.get('strategy', ''), content])
