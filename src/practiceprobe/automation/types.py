from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, List, Tuple, Callable
from datetime import datetime


class LocatorStrategy(str, Enum):
    ID = "id"
    NAME = "name"
    XPATH = "xpath"
    CSS = "css"


class Action(str, Enum):
    NONE = "none"
    CLICK_FIRST = "click_first"
    TYPE_AND_CLEAR = "type_and_clear"
    SELECT_BY_TEXT = "select_by_text"
    TOGGLE_EACH = "toggle_each"


class CheckStatus(str, Enum):
    PASSED = "passed"
    OBSERVED = "observed"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True)
class Locator:
    strategy: LocatorStrategy
    value: str

    def __str__(self) -> str:
        return f"{self.strategy.value}={self.value}"


@dataclass
class Observation:
    check: str
    status: CheckStatus = CheckStatus.OBSERVED
    found: int = 0
    before: List[Dict[str, Any]] = field(default_factory=list)
    after: List[Dict[str, Any]] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)
    failures: List[str] = field(default_factory=list)
    error: Optional[str] = None
    started_at: datetime = field(default_factory=datetime.utcnow)
    finished_at: Optional[datetime] = None


@dataclass(frozen=True)
class Expectation:
    message: str
    predicate: Callable[[Observation], bool]


@dataclass(frozen=True)
class Check:
    name: str
    title: str
    priority: int
    locator: Locator
    reads: Tuple[str, ...] = ()
    action: Action = Action.NONE
    input_text: Optional[str] = None
    limit: Optional[int] = None
    required: bool = True
    track_windows: bool = False
    expectations: Tuple[Expectation, ...] = ()


@dataclass
class RunReport:
    url: str
    title: Optional[str] = None
    observations: List[Observation] = field(default_factory=list)
    launch_error: Optional[str] = None
    setup_error: Optional[str] = None

    def count(self, status: CheckStatus) -> int:
        return sum(1 for o in self.observations if o.status == status)

    @property
    def ok(self) -> bool:
        if self.launch_error or self.setup_error:
            return False
        return all(o.status not in (CheckStatus.FAILED, CheckStatus.ERROR) for o in self.observations)
