import enum


class TaskStatus(str, enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    BLOCKED = "blocked"
    DONE = "done"
    CANCELLED = "cancelled"


# Manually-set states that roll-up derivation never overrides
STICKY_STATUSES = frozenset({TaskStatus.BLOCKED, TaskStatus.CANCELLED})


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class InputType(str, enum.Enum):
    CHECKBOX = "checkbox"
    NUMBER = "number"
    TEXT = "text"
    PHOTO = "photo"


class LocationType(str, enum.Enum):
    YARD = "yard"
    BEEHOME = "beehome"
    OTHER = "other"


class SubTaskStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETE = "complete"


class MemberRole(str, enum.Enum):
    MANAGER = "manager"
    BEEKEEPER = "beekeeper"
