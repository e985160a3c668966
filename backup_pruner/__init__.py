"""Age-based pruning of dated backup archives."""

from .calendar_index import CalendarIndex
from .errors import ConfigError, DeleteError, PruneError, ReadError
from .models import BackupRecord, Date, Removal, parse_backup, parse_date, today_utc
from .policy import RetentionPolicy, apply_policy, keep_days, policy_for
from .pruner import plan_removals, prune
