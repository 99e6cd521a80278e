"""Tests for the Liskov Substitution bird example."""

import pytest

from solid.errors import UnsupportedOperationError
from solid.interfaces import IFlyingBird, IRunningBird
from solid.birds import Sparrow, Ostrich, Penguin, make_bird_fly, make_bird_run
from tests.antipatterns import FlightlessOstrich


class TestFlyingBirds:

    def test_sparrow_flies(self, capsys):
        make_bird_fly(Sparrow())
        assert capsys.readouterr().out == "Sparrow is flying\n"

    def test_new_flying_bird_substitutes(self, capsys):
        """Any honest IFlyingBird can be passed to make_bird_fly."""
        class Eagle(IFlyingBird):
            def fly(self) -> None:
                print("Eagle is soaring")

        make_bird_fly(Eagle())
        assert capsys.readouterr().out == "Eagle is soaring\n"


class TestRunningBirds:

    @pytest.mark.parametrize(
        "bird, expected",
        [(Ostrich(), "Ostrich is running\n"), (Penguin(), "Penguin is waddling\n")],
    )
    def test_running_birds(self, capsys, bird, expected):
        make_bird_run(bird)
        assert capsys.readouterr().out == expected

    @pytest.mark.parametrize("bird_cls", [Ostrich, Penguin])
    def test_flightless_birds_do_not_claim_flight(self, bird_cls):
        """Flightless birds are not IFlyingBird and expose no fly()."""
        bird = bird_cls()
        assert not isinstance(bird, IFlyingBird)
        assert isinstance(bird, IRunningBird)
        assert not hasattr(bird, "fly")

    def test_sparrow_is_not_a_running_bird(self):
        assert not isinstance(Sparrow(), IRunningBird)


class TestBrokenSubstitution:
    """A bird forced into IFlyingBird breaks the coordinator."""

    def test_flightless_ostrich_breaks_make_bird_fly(self):
        with pytest.raises(UnsupportedOperationError) as exc_info:
            make_bird_fly(FlightlessOstrich())
        assert exc_info.value.operation == "fly"
        assert exc_info.value.variant == "FlightlessOstrich"
