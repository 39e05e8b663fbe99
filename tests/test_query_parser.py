import random

import pytest

from core import Priority, Query, Status, parse_query


def test_empty_input_is_empty_query():
    for raw in ("", "   ", "\t\n"):
        q = parse_query(raw)
        assert q == Query()
        assert q.is_empty


def test_sigils_become_predicates():
    q = parse_query("#Bug @Work !done p1 login")
    assert q.tag == "bug"
    assert q.category == "work"
    assert q.status == Status.DONE
    assert q.priority == Priority.P1
    assert q.terms == ("login",)
    assert q.has_predicates


@pytest.mark.parametrize(
    "token,status",
    [
        ("!todo", Status.TODO),
        ("!inprogress", Status.IN_PROGRESS),
        ("!in-progress", Status.IN_PROGRESS),
        ("!IN_PROGRESS", Status.IN_PROGRESS),
        ("!Archived", Status.ARCHIVED),
    ],
)
def test_status_aliases(token, status):
    assert parse_query(token).status == status


def test_last_predicate_of_a_kind_wins():
    q = parse_query("#a #b @x @y p0 P4 !todo !done")
    assert q.tag == "b"
    assert q.category == "y"
    assert q.priority == Priority.P4
    assert q.status == Status.DONE


def test_unknown_status_degrades_to_free_text():
    q = parse_query("!urgent fix")
    assert q.status is None
    assert q.terms == ("!urgent", "fix")


def test_bare_sigils_are_ignored():
    q = parse_query("# @ ! report")
    assert q.tag is None and q.category is None and q.status is None
    assert q.terms == ("report",)


def test_priority_lookalikes_stay_free_text():
    q = parse_query("p6 p10 px P3")
    assert q.priority == Priority.P3
    assert q.terms == ("p6", "p10", "px")


def test_terms_are_lowercased_and_keep_order():
    assert parse_query("Zeta ALPHA beta").terms == ("zeta", "alpha", "beta")


def test_describe_mentions_every_part():
    text = parse_query("login #bug !done").describe()
    assert "login" in text
    assert "tag=bug" in text
    assert "status=Done" in text
    assert parse_query("").describe() == "all"


def test_parser_never_raises_on_arbitrary_input():
    rng = random.Random(1234)
    alphabet = "#@!pP0123456789 abcxyz\t\n-_ñ☃\x00​"
    for _ in range(500):
        raw = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 24)))
        q = parse_query(raw)
        assert isinstance(q, Query)
        assert all(t == t.lower() and t for t in q.terms)
    for _ in range(200):
        blob = bytes(rng.randint(0, 255) for _ in range(rng.randint(0, 32)))
        parse_query(blob.decode("utf-8", errors="replace"))
