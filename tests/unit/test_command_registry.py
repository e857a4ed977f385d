from __future__ import annotations

import unittest

from commands.catalog import ADMIN_COMMANDS
from commands.registry import CommandRegistry
from commands.schemas import normalize_name
from protocol.meta_ops import MetaOp


class CommandRegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = CommandRegistry.default()

    def test_catalog_has_every_opcode_once(self) -> None:
        specs = self.registry.list_all()
        self.assertEqual(len(specs), 8)
        self.assertEqual(len({spec.key for spec in specs}), 8)
        self.assertEqual({spec.opcode for spec in specs}, set(MetaOp))

    def test_lookup_is_case_insensitive(self) -> None:
        for spec in self.registry:
            mixed = "".join(
                ch.upper() if idx % 2 else ch for idx, ch in enumerate(spec.key)
            )
            with self.subTest(key=spec.key):
                self.assertIs(self.registry.lookup(spec.key), spec)
                self.assertIs(self.registry.lookup(spec.key.upper()), spec)
                self.assertIs(self.registry.lookup(mixed), spec)

    def test_display_name_and_description(self) -> None:
        spec = self.registry.lookup("dump_chunktoservermap")
        assert spec is not None
        self.assertEqual(spec.display_name, "DUMP_CHUNKTOSERVERMAP")
        self.assertEqual(spec.opcode, MetaOp.DUMP_CHUNKTOSERVERMAP)
        self.assertEqual(
            spec.description,
            "create chunk server to chunk id map file used by the off line"
            " re-balance utility and layout emulator",
        )

    def test_unknown_lookup_returns_none(self) -> None:
        self.assertIsNone(self.registry.lookup("bogus"))
        self.assertNotIn("bogus", self.registry)
        self.assertIn("OPEN_FILES", self.registry)

    def test_normalize_only_folds_ascii(self) -> None:
        self.assertEqual(normalize_name("Open_FILES"), "open_files")
        self.assertEqual(normalize_name("ÄBC"), "Äbc")

    def test_non_ascii_name_is_not_folded_into_a_match(self) -> None:
        self.assertIsNone(self.registry.lookup("OPEN_FİLES"))

    def test_list_all_is_sorted_by_key(self) -> None:
        keys = [spec.key for spec in self.registry.list_all()]
        self.assertEqual(keys, sorted(keys))
        self.assertEqual(keys[0], "check_leases")

    def test_render_listing_aligns_names(self) -> None:
        lines = self.registry.render_listing()
        width = self.registry.max_key_length
        self.assertEqual(width, len("dump_chunkreplicationcandidates"))
        self.assertEqual(len(lines), 8)
        for line in lines:
            self.assertEqual(line.index(" -- "), width)
        self.assertIn(
            "open_files".rjust(width) + " -- debug: list all chunk leases", lines
        )

    def test_describe_one(self) -> None:
        self.assertEqual(
            self.registry.describe_one("Check_Leases"),
            "check_leases -- debug: run chunk leases check",
        )
        self.assertEqual(self.registry.describe_one("bogus"), "no such command: bogus")

    def test_duplicate_entries_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CommandRegistry(ADMIN_COMMANDS + ((MetaOp.OPEN_FILES, "again"),))

    def test_registry_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.registry._specs["extra"] = self.registry.list_all()[0]  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()
