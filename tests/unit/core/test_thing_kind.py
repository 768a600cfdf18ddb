"""Unit tests for ThingKind fullname helpers."""

import pytest

from neon.raw import ThingKind


def test_fullname_roundtrip():
    assert ThingKind.LINK.fullname("abc") == "t3_abc"
    assert ThingKind.from_fullname("t1_xyz") is ThingKind.COMMENT


def test_non_prefix_kinds_cannot_build_fullnames():
    assert not ThingKind.LISTING.is_fullname_prefix
    with pytest.raises(ValueError):
        ThingKind.MORE.fullname("x")


def test_from_fullname_rejects_garbage():
    with pytest.raises(ValueError):
        ThingKind.from_fullname("nounderscore")
    with pytest.raises(ValueError):
        ThingKind.from_fullname("t9_abc")


def test_kind_compares_to_wire_value():
    assert ThingKind.SUBREDDIT == "t5"
