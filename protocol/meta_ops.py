"""Meta server administration opcodes shared by registry, client, and tests."""

from enum import IntEnum


class MetaOp(IntEnum):
    CHECK_LEASES = 1
    RECOMPUTE_DIRSIZE = 2
    DUMP_CHUNKTOSERVERMAP = 3
    DUMP_CHUNKREPLICATIONCANDIDATES = 4
    OPEN_FILES = 5
    GET_CHUNK_SERVERS_COUNTERS = 6
    GET_CHUNK_SERVER_DIRS_COUNTERS = 7
    GET_REQUEST_COUNTERS = 8
