from __future__ import annotations

from catalogsync.domain.reconciliation.ordering import reconcile_order
from tests.support.catalog import Draft, Entry, build_reorder


def test_same_order_needs_no_reorder() -> None:
    old = [Entry("a", "1"), Entry("b", "2")]

    action = reconcile_order(
        old,
        [Draft("a"), Draft("b")],
        removed_keys=frozenset(),
        build_reorder=build_reorder,
    )

    assert action is None


def test_swapped_entries_produce_one_reorder_with_ids() -> None:
    old = [Entry("a", "1"), Entry("b", "2"), Entry("c", "3")]

    action = reconcile_order(
        old,
        [Draft("c"), Draft("a"), Draft("b")],
        removed_keys=frozenset(),
        build_reorder=build_reorder,
    )

    assert action == ("reorder", ("3", "1", "2"))


def test_removed_entries_are_excluded_from_the_baseline() -> None:
    old = [Entry("a", "1"), Entry("b", "2"), Entry("c", "3")]

    action = reconcile_order(
        old,
        [Draft("b"), Draft("c")],
        removed_keys=frozenset({"a"}),
        build_reorder=build_reorder,
    )

    assert action is None


def test_new_drafts_do_not_take_part_in_the_order() -> None:
    old = [Entry("a", "1"), Entry("b", "2")]

    action = reconcile_order(
        old,
        [Draft("new"), Draft("a"), Draft("other"), Draft("b")],
        removed_keys=frozenset(),
        build_reorder=build_reorder,
    )

    assert action is None


def test_unkeyed_drafts_are_skipped_in_the_target_order() -> None:
    old = [Entry("a", "1"), Entry("b", "2")]

    action = reconcile_order(
        old,
        [Draft(None), Draft("b"), Draft("a")],
        removed_keys=frozenset(),
        build_reorder=build_reorder,
    )

    assert action == ("reorder", ("2", "1"))
