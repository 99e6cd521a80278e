# solid/birds.py
from solid.interfaces import IFlyingBird, IRunningBird


class Sparrow(IFlyingBird):
    """A normal bird that can fly. Safe wherever IFlyingBird is expected."""
    def fly(self) -> None:
        print("Sparrow is flying")


class Ostrich(IRunningBird):
    """
    Cannot fly, so it does not claim IFlyingBird.
    Passing it to make_bird_fly() would break the flight contract.
    """
    def run(self) -> None:
        print("Ostrich is running")


class Penguin(IRunningBird):
    def run(self) -> None:
        print("Penguin is waddling")


def make_bird_fly(bird: IFlyingBird) -> None:
    # every IFlyingBird can fly
    bird.fly()


def make_bird_run(bird: IRunningBird) -> None:
    bird.run()
