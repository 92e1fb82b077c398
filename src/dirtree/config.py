from enum import Enum

from attrs import field, frozen


class CollisionPolicy(Enum):
    overwrite = "overwrite"
    fail = "fail"


def _positive(instance, attribute, value):
    if value < 1:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


@frozen
class TreeSettings:
    """Behavioural switches for a Directory.

    Attributes:
      - collision_policy: What create/move do when the target name already exists.
        `overwrite` replaces the existing sibling (and discards its subtree);
        `fail` raises NameCollisionError and leaves the tree unchanged.
      - indent_width: Spaces per depth level in `Directory.list()`.
    """

    collision_policy: CollisionPolicy = CollisionPolicy.overwrite
    indent_width: int = field(default=2, validator=_positive)


DEFAULT_SETTINGS = TreeSettings()
