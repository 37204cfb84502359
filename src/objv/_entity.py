"""Uniform storage for every runtime object."""

__all__ = ["Entity", "make_entity", "get_slot", "set_slot"]


class Entity:
    """Runtime object for both plain instances and classes.

    An entity is nothing more than the identifier of its class followed by
    positional slots. Slot meaning comes from the instance variable list of
    the class, so an entity carries no behavior of its own.

    Args:
        class_id: (str) Name of the class this entity belongs to
        slots: (list) Slot values in instance variable order

    Attributes:
        class_id: (str) Name of the class this entity belongs to
        slots: (list) Slot values, never resized after creation
    """

    __slots__ = ("class_id", "slots")

    def __init__(self, class_id, slots):
        self.class_id = class_id
        self.slots = slots

    def __repr__(self):
        return f"Entity<{self.class_id}>"


def make_entity(class_id, slot_values):
    """Create an entity with a private copy of the slot values."""
    return Entity(class_id, list(slot_values))


def _check_index(entity, index):
    if not 0 <= index < len(entity.slots):
        raise IndexError(
            f"Slot index {index} out of range for {entity!r} "
            f"with {len(entity.slots)} slots"
        )


def get_slot(entity, index):
    """Read slot by position.

    Args:
        entity: (Entity) Object to read
        index: (int) Zero based slot position
    Returns:
        (object) Stored value
    Raises:
        IndexError: Position is outside the entity slots
    """
    _check_index(entity, index)
    return entity.slots[index]


def set_slot(entity, index, value):
    """Write slot by position, raising IndexError when out of range."""
    _check_index(entity, index)
    entity.slots[index] = value
