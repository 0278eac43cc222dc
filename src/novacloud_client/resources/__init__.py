from .control import Control
from .logs import Logs
from .players import Players
from .scheduled_control import ScheduledControl
from .screens import Screens
from .solutions import Solutions

__all__ = ["Control", "Logs", "Players", "ScheduledControl", "Screens", "Solutions"]
