from operator import attrgetter
from typing import Generic, Protocol, TypeVar

from pgcss.types import BoxModel

CO_T = TypeVar("CO_T", covariant=True)
V_T = TypeVar("V_T")

#################### Attrgetters/setters ###########################


# https://stackoverflow.com/questions/54785148/destructuring-dicts-and-objects-in-python
class T4Getter(Protocol[CO_T]):
    def __call__(self, input: BoxModel) -> tuple[CO_T, CO_T, CO_T, CO_T]:
        ...


class attrsetter(Generic[V_T]):
    def __init__(self, keys: tuple[str, ...]):
        self.keys = keys

    def __call__(self, obj, values: tuple[V_T, ...]) -> None:
        for key, value in zip(self.keys, values):
            setattr(obj, key, value)


directions = ("top", "right", "bottom", "left")
vertical = frozenset({"top", "bottom"})

# fmt: off
pad_keys = tuple(f"padding_{k}" for k in directions)
marg_keys = tuple(f"margin_{k}" for k in directions)

pad_getter: T4Getter[float] = attrgetter(*pad_keys)     # type: ignore[assignment]
mrg_getter: T4Getter[float] = attrgetter(*marg_keys)    # type: ignore[assignment]
pad_setter: attrsetter[float] = attrsetter(pad_keys)
mrg_setter: attrsetter[float] = attrsetter(marg_keys)

# "padding-top" -> ("padding_top", True), the bool tells whether the side is vertical
side_keys: dict[str, tuple[str, bool]] = {
    f"{kind}-{k}": (f"{kind}_{k}", k in vertical)
    for kind in ("padding", "margin")
    for k in directions
}
# fmt: on
####################################################################

__all__ = [
    "directions",
    "pad_keys",
    "marg_keys",
    "pad_getter",
    "mrg_getter",
    "pad_setter",
    "mrg_setter",
    "side_keys",
]
