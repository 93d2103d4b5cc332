"""Iceland core library — areas, the session timer and the session ledger.

Public API re-exports for convenient imports:
    from iceland import Workspace, SessionRecord, totals_by_area, ...
"""

__version__ = "0.2.0"

# Workspace & paths
from iceland.workspace import (
    iceland_root,
    now_local,
    format_timestamp,
    parse_timestamp,
    config_path,
    current_area_path,
    session_start_path,
    sessions_path,
    area_dir,
    validate_area_name,
)

# Errors
from iceland.errors import (
    IcelandError,
    ConfigError,
    AreaNotFound,
    AreaAlreadyExists,
    InvalidAreaName,
    NoActiveSession,
    SessionAlreadyActive,
    NoCurrentArea,
    ParseError,
    StorageError,
)

# Models
from iceland.models import (
    Config,
    SessionRecord,
    LedgerScan,
    SwitchResult,
    RemovalResult,
    DEFAULT_AREAS,
    DEFAULT_BROWSER_COMMAND,
)

# State repositories
from iceland.config import ConfigStore
from iceland.pointer import CurrentAreaPointer
from iceland.timer import SessionTimer
from iceland.ledger import SessionLedger

# Aggregation
from iceland.stats import (
    totals_by_area,
    sorted_totals,
    grand_total,
    history,
    format_duration,
)

# Coordination
from iceland.scaffold import AreaScaffolder
from iceland.browser import BrowserLauncher
from iceland.switch import AreaSwitchCoordinator
from iceland.lifecycle import AreaLifecycle
from iceland.context import Workspace, Status
