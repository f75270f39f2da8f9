"""
Storage and guard helpers used by the adaptors
"""

from reiterate.util.segmented_list import SegmentedList, DEFAULT_CHUNK_SIZE
from reiterate.util.guard import PullGuard, GuardedCell
