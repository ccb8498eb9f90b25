from __future__ import annotations

import random

import pytest

from supplementary_figures.navigation import NavigationController, clamp


def _nav(rng: random.Random) -> NavigationController:
    return NavigationController(rng=rng)


def test_initial_state_is_first_figure(rng: random.Random) -> None:
    nav = _nav(rng)
    assert nav.current_figure == 1
    assert nav.total_figures == 15
    assert nav.at_first and not nav.at_last


@pytest.mark.parametrize("n", [-100, -3, 0, 1, 2, 7, 14, 15, 16, 20, 10_000])
def test_jump_to_clamps(rng: random.Random, n: int) -> None:
    nav = _nav(rng)
    view = nav.jump_to(n)
    assert nav.current_figure == clamp(n, 1, 15)
    assert view.figure_id == nav.current_figure


def test_next_at_last_stays(rng: random.Random) -> None:
    nav = _nav(rng)
    nav.jump_to(15)
    view = nav.next()
    assert nav.current_figure == 15
    assert view.figure_id == 15
    assert nav.at_last


def test_previous_at_first_stays(rng: random.Random) -> None:
    nav = _nav(rng)
    view = nav.previous()
    assert nav.current_figure == 1
    assert view.figure_id == 1


def test_end_to_end_scenario(rng: random.Random) -> None:
    nav = _nav(rng)
    for _ in range(5):
        nav.next()
    assert nav.current_figure == 6
    nav.jump_to(20)
    assert nav.current_figure == 15
    nav.jump_to(-3)
    assert nav.current_figure == 1


def test_every_transition_generates_fresh_dataset(rng: random.Random) -> None:
    nav = _nav(rng)
    first = nav.jump_to(4)
    # Boundary no-ops and refreshes still regenerate.
    again = nav.jump_to(4)
    refreshed = nav.refresh()
    assert first.dataset is not again.dataset
    assert again.dataset is not refreshed.dataset
    assert not first.dataset["trainLoss"].equals(again.dataset["trainLoss"])


def test_boundary_noop_regenerates(rng: random.Random) -> None:
    nav = _nav(rng)
    a = nav.previous()
    b = nav.previous()
    assert a.figure_id == b.figure_id == 1
    assert a.dataset is not b.dataset
    assert not a.dataset.equals(b.dataset)


def test_page_label(rng: random.Random) -> None:
    nav = _nav(rng)
    view = nav.jump_to(3)
    assert view.page_label == "3 / 15"


def test_out_of_range_jump_is_logged(rng: random.Random, caplog) -> None:
    nav = _nav(rng)
    with caplog.at_level("WARNING", logger="supplementary_figures.navigation"):
        nav.jump_to(99)
    assert any("out of range" in r.message for r in caplog.records)


def test_seeded_controllers_are_reproducible() -> None:
    a = NavigationController(rng=random.Random(7)).jump_to(13)
    b = NavigationController(rng=random.Random(7)).jump_to(13)
    assert a.dataset.equals(b.dataset)
