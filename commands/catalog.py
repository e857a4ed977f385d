"""Fixed catalog of meta server administration commands."""

from protocol.meta_ops import MetaOp

ADMIN_COMMANDS: tuple[tuple[MetaOp, str], ...] = (
    (MetaOp.CHECK_LEASES, "debug: run chunk leases check"),
    (MetaOp.RECOMPUTE_DIRSIZE, "debug: recompute directories sizes"),
    (
        MetaOp.DUMP_CHUNKTOSERVERMAP,
        "create chunk server to chunk id map file used by the off line"
        " re-balance utility and layout emulator",
    ),
    (
        MetaOp.DUMP_CHUNKREPLICATIONCANDIDATES,
        "debug: list content of the chunks re-replication and recovery queues",
    ),
    (MetaOp.OPEN_FILES, "debug: list all chunk leases"),
    (MetaOp.GET_CHUNK_SERVERS_COUNTERS, "stats: output chunk server counters"),
    (MetaOp.GET_CHUNK_SERVER_DIRS_COUNTERS, "stats: output chunk directories counters"),
    (MetaOp.GET_REQUEST_COUNTERS, "stats: get meta server request counters"),
)
