import pytest

from typo2wp.migrators.wordpress_migrator import CATEGORY, POST_TAG, WordPressTarget
from typo2wp.utils.pre_flight_checks import PreFlightCheckError, run_pre_flight_checks


@pytest.fixture
def target(connection):
    return WordPressTarget(connection, "wp_")


def test_copy_term_is_idempotent(target, wp, fetch):
    first = target.copy_term("News", "news", CATEGORY)
    second = target.copy_term("News", "news", CATEGORY)

    assert first == second
    assert len(fetch(wp["wp_terms"])) == 1
    assert len(fetch(wp["wp_term_taxonomy"])) == 1


def test_same_slug_in_two_taxonomies_shares_the_term(target, wp, fetch):
    category = target.copy_term("Ruby", "ruby", CATEGORY)
    tag = target.copy_term("ruby", "ruby", POST_TAG)

    assert category != tag
    assert len(fetch(wp["wp_terms"])) == 1
    taxonomies = {row["taxonomy"] for row in fetch(wp["wp_term_taxonomy"])}
    assert taxonomies == {"category", "post_tag"}


def test_copy_term_reuses_preexisting_rows(target, wp, insert):
    insert(wp["wp_terms"], {"term_id": 7, "name": "News", "slug": "news"})
    insert(wp["wp_term_taxonomy"], {"term_taxonomy_id": 12, "term_id": 7, "taxonomy": "category", "count": 3})

    assert target.copy_term("News again", "news", CATEGORY) == 12


def test_lookups_return_none_when_absent(target):
    assert target.find_term("missing") is None
    assert target.find_term_taxonomy(99, CATEGORY) is None


def test_make_relationship_increments_count_once_per_link(target, wp, fetch):
    tt_id = target.copy_term("News", "news", CATEGORY)
    target.make_relationship(1, tt_id)
    target.make_relationship(2, tt_id)

    (row,) = fetch(wp["wp_term_taxonomy"])
    assert row["count"] == 2
    assert len(fetch(wp["wp_term_relationships"])) == 2


def test_post_helpers(target, wp, fetch):
    post_id = target.insert_post({"post_name": "about", "post_type": "page", "post_title": "About"})
    target.add_postmeta(post_id, "_wp_page_template", "default")

    assert target.matching_post_ids("about", "page") == [post_id]
    assert target.matching_post_ids("about", "post") == []

    target.update_post(post_id, {"post_title": "About me"})
    target.delete_postmeta(post_id)

    (post,) = fetch(wp["wp_posts"])
    assert post["post_title"] == "About me"
    assert fetch(wp["wp_postmeta"]) == []


def test_pre_flight_passes_with_right_prefix(connection):
    run_pre_flight_checks(connection, "wp_")


def test_pre_flight_fails_with_wrong_prefix(connection):
    with pytest.raises(PreFlightCheckError, match="Perhaps your prefix is wrong"):
        run_pre_flight_checks(connection, "blog_")


def test_existing_relationship_is_not_linked_twice(target, wp, fetch):
    tt_id = target.copy_term("News", "news", CATEGORY)

    assert target.make_relationship(1, tt_id) is True
    assert target.make_relationship(1, tt_id) is False

    assert len(fetch(wp["wp_term_relationships"])) == 1
    (row,) = fetch(wp["wp_term_taxonomy"])
    assert row["count"] == 1
