import os
import json
import sys
import jsonschema
from universal.errors import FatalInputError, LineParseError, PageSkipped
from universal.nodes import normalize_page
from universal.blocks import extract_blocks
from universal.hierarchy import extract_hierarchy
from universal.files import makedirs, create_filename, write_json
from universal.options import default_options
from maxroll.data import load_config
from maxroll.classifier import is_boss_page
from maxroll.urls import url_to_folder_and_slug
from maxroll.schema import validate_against_schema


def parse(page, config=None, external_strategies=False):
    """Turns one crawled page into (blocks, hierarchical).

    hierarchical is None unless the page is about a boss. Nothing is kept
    between calls.
    """
    if config is None:
        config = load_config()
    canonical = normalize_page(page)
    title = page_title(page)
    url = page_url(page)
    blocks = extract_blocks(canonical, title)
    hierarchical = None
    if is_boss_page(page, config['boss_keywords']):
        hierarchical = extract_hierarchy(
            canonical, title, url, config, external_strategies)
    return blocks, hierarchical


def parse_file(filename, options):
    if options.verbose:
        sys.stderr.write("%s\n" % os.path.basename(filename))
    result = new_result()
    pages = load_pages(filename, result, options.verbose)
    return parse_all(pages, options, result)


def parse_all(pages, options=None, result=None, config=None):
    if options is None:
        options = default_options()
    if result is None:
        result = new_result()
    if not options.dryrun and not options.output:
        raise FatalInputError("An output directory is required unless this is a dry run")
    if config is None:
        config = load_config()
    result['totalPages'] += len(pages)
    if options.verbose:
        sys.stderr.write("Processing %s pages...\n" % len(pages))
    for page in pages:
        process_page(page, options, result, config)
    log_summary(result)
    return result


def load_pages(filename, result, verbose=False):
    try:
        with open(filename, encoding='utf-8') as fp:
            text = fp.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FatalInputError("Failed to read input file: %s" % e) from e
    return read_pages(text, result, verbose)


def read_pages(text, result, verbose=False):
    """Reads a JSON array of pages, or one page per line.

    Bad lines are recorded in result and skipped. No pages at all is fatal.
    """
    try:
        data = json.loads(text)
        if isinstance(data, list):
            if verbose:
                sys.stderr.write("Detected JSON array format\n")
            if len(data) == 0:
                raise FatalInputError("No valid JSON objects found in the input")
            return data
    except ValueError:
        pass
    if verbose:
        sys.stderr.write("Detected JSONL format, parsing line by line...\n")
    pages = []
    for i, line in enumerate(text.strip().split("\n")):
        line = line.strip()
        if not line:
            continue
        try:
            pages.append(json.loads(line))
        except ValueError as e:
            result['errors'].append(str(LineParseError(i + 1, e)))
    if len(pages) == 0:
        raise FatalInputError("No valid JSON objects found in the input")
    return pages


def process_page(page, options, result, config):
    try:
        folder = convert_page(page, options, config)
    except PageSkipped as e:
        skip_page(result, str(e))
        return
    except Exception as e:
        skip_page(result, 'Failed to process page "%s": %s' % (page_title(page), e))
        return
    if not options.dryrun:
        add_folder(result, folder)
    result['pagesParsed'] += 1


def convert_page(page, options, config):
    """Parses, validates and writes one page.

    Every reason to leave a page out is raised as PageSkipped carrying the
    message for the summary. Returns the output folder.
    """
    try:
        blocks, hierarchical = parse(page, config, options.external_strategies)
    except PageSkipped as e:
        raise PageSkipped("Failed to process page: %s" % e) from e
    title = page_title(page)
    url = page_url(page)
    if not blocks:
        raise PageSkipped('Skipping page "%s" - no content blocks' % title)
    folder, slug = url_to_folder_and_slug(url, config['urls'])
    if slug == config['urls']['unknown_slug']:
        raise PageSkipped("Could not extract slug from URL: %s" % url)
    if not options.hierarchy:
        hierarchical = None
    if not options.skip_schema:
        try:
            validate_against_schema(blocks, "content_blocks.schema.json")
            if hierarchical:
                validate_against_schema(hierarchical, "hierarchical.schema.json")
        except jsonschema.ValidationError as e:
            raise PageSkipped('Invalid output for page "%s": %s' % (title, e.message)) from e
    if options.dryrun:
        if options.verbose:
            outfile = os.path.join(options.output or '', folder, "%s.json" % slug)
            sys.stderr.write("[DRY RUN] Would write %s blocks to: %s\n" % (
                len(blocks), outfile))
        if options.stdout:
            print(json.dumps(blocks, indent=2))
            if hierarchical:
                print(json.dumps(hierarchical, indent=2))
        return folder
    try:
        write_page(options.output, folder, slug, blocks, hierarchical)
    except OSError as e:
        raise PageSkipped('Failed to write page "%s": %s' % (title, e)) from e
    return folder


def write_page(output, folder, slug, blocks, hierarchical=None):
    jsondir = makedirs(output, folder)
    print("%s: %s" % (folder, slug))
    written = []
    try:
        written.append(write_json(create_filename(jsondir, slug), blocks))
        if hierarchical:
            written.append(write_json(
                create_filename(jsondir, slug, 'hierarchical'), hierarchical))
    except OSError:
        # a page is written whole or not at all
        for filename in written:
            os.remove(filename)
        raise


def page_title(page):
    if not isinstance(page, dict):
        return ''
    return str(page.get('title') or '')


def page_url(page):
    if not isinstance(page, dict):
        return ''
    return str(page.get('url') or '')


def new_result():
    return {
        'totalPages': 0,
        'pagesParsed': 0,
        'pagesSkipped': 0,
        'outputFolders': [],
        'errors': []
    }


def add_folder(result, folder):
    if folder not in result['outputFolders']:
        result['outputFolders'].append(folder)


def skip_page(result, message):
    result['pagesSkipped'] += 1
    result['errors'].append(message)


def log_summary(result):
    lines = [
        "",
        "=== Parse Summary ===",
        "Total pages: %s" % result['totalPages'],
        "Pages parsed: %s" % result['pagesParsed'],
        "Pages skipped: %s" % result['pagesSkipped'],
        "Output folders: %s" % len(result['outputFolders'])
    ]
    if result['outputFolders']:
        lines.append("Folders created:")
        lines.extend(["  - %s" % f for f in result['outputFolders']])
    if result['errors']:
        lines.append("")
        lines.append("Errors encountered: %s" % len(result['errors']))
        lines.extend(["  - %s" % e for e in result['errors']])
    sys.stderr.write("\n".join(lines) + "\n")
