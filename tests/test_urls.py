import pytest

from maxroll.urls import url_to_folder_and_slug, decode_filters


class TestUrlToFolderAndSlug:
    @pytest.mark.parametrize("url,expected", [
        ("https://maxroll.gg/d4/bosses/ashava", ("bosses", "ashava")),
        ("https://maxroll.gg/d4/build-guides/whirlwind-barbarian", ("builds", "whirlwind-barbarian")),
        ("https://maxroll.gg/d4/getting-started/first-steps", ("gameplay_mechanics", "first-steps")),
        ("https://maxroll.gg/d4/tierlists", ("tier_lists", "tierlists")),
        ("https://maxroll.gg/d4/unheard-of/page", ("misc", "page")),
        ("https://maxroll.gg/d4/resources/a/b", ("resources", "a")),
        ("https://maxroll.gg/d4", ("misc", "diablo-4-home")),
        ("https://maxroll.gg/d4/", ("misc", "diablo-4-home")),
        ("https://maxroll.gg/poe/bosses/ashava", ("misc", "unknown")),
        ("https://maxroll.gg/", ("misc", "unknown")),
        ("/d4/bosses/ashava", ("bosses", "ashava")),
    ])
    def test_mapping(self, url, expected):
        assert url_to_folder_and_slug(url) == expected

    def test_class_filter(self):
        folder, slug = url_to_folder_and_slug(
            "https://maxroll.gg/d4/builds?filter[classes][value]=d4-barbarian")
        assert folder == "builds"
        assert slug == "builds-barbarian"

    def test_all_filters_in_order(self):
        url = ("https://maxroll.gg/d4/build-guides?filter[build_guide_type][filters][0][value]=endgame"
               "&filter[metas][value]=d4-season-5&filter[classes][value]=d4-rogue")
        assert url_to_folder_and_slug(url) == ("builds", "build-guides-rogue-season-5-endgame")

    def test_unrelated_query_ignored(self):
        assert url_to_folder_and_slug("https://maxroll.gg/d4/bosses/ashava?utm_source=x") == (
            "bosses", "ashava")

    def test_deterministic(self):
        url = "https://maxroll.gg/d4/builds?filter[classes][value]=d4-druid"
        assert url_to_folder_and_slug(url) == url_to_folder_and_slug(url)

    def test_none_url(self):
        assert url_to_folder_and_slug(None) == ("misc", "unknown")


class TestDecodeFilters:
    def test_empty_query(self):
        assert decode_filters("", [["filter[classes][value]", "d4-"]]) == ""

    def test_prefix_only_stripped_at_start(self):
        filters = [["filter[classes][value]", "d4-"]]
        assert decode_filters("filter[classes][value]=necro-d4-", filters) == "necro-d4-"

    def test_filter_value_cannot_leave_folder(self):
        assert decode_filters("filter[classes][value]=d4-..%2F..%2Fetc",
                              [["filter[classes][value]", "d4-"]]) == "etc"
        folder, slug = url_to_folder_and_slug(
            "https://maxroll.gg/d4/builds?filter[classes][value]=d4-a/b")
        assert slug == "builds-ab"
