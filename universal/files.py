import os
import json


def char_replace(instr):
    for char in ['(', ')', '[', ']', ',', '/', "'", ":", ";", "&", ".", "#", "’", "?", "*"]:
        instr = instr.replace(char, '')
    instr = instr.strip()
    instr = instr.replace(' ', '_')
    return instr.lower()


def makedirs(output, folder):
    jsondir = os.path.abspath(output + "/" + char_replace(folder))
    if not os.path.exists(jsondir):
        os.makedirs(jsondir)
    return jsondir


def create_filename(jsondir, slug, suffix=None):
    name = slug
    if suffix:
        name = "%s-%s" % (slug, suffix)
    return os.path.abspath(jsondir + "/" + name + ".json")


def write_json(filename, data):
    with open(filename, 'w', encoding='utf-8') as fp:
        json.dump(data, fp, indent=2, ensure_ascii=False)
    return filename
