import os
import sys
import tempfile
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from contract_puller import manifest
from contract_puller.types import ManifestEntry
from tests.helpers import IMPL_ADDR, PROXY_ADDR, SAMPLE_ABI, make_record


def make_entry(address=PROXY_ADDR, files=None):
    return manifest.build_entry(address, make_record(address), "Token", files or ["Token.sol"])


class TestManifestStore(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.location = manifest.manifest_path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_manifest_path(self):
        self.assertEqual(self.location, os.path.join(self.tmp.name, "results.json"))

    def test_load_missing_returns_empty(self):
        self.assertEqual(manifest.load(self.location), {})

    def test_load_corrupted_returns_empty(self):
        with open(self.location, "w") as f:
            f.write('{"0xabc": {"address": ')
        with self.assertLogs(level="WARNING"):
            self.assertEqual(manifest.load(self.location), {})

    def test_load_non_object_returns_empty(self):
        with open(self.location, "w") as f:
            f.write("[1, 2, 3]")
        self.assertEqual(manifest.load(self.location), {})

    def test_upsert_stamps_entry(self):
        updated = manifest.upsert({}, PROXY_ADDR, make_entry(), clock=lambda: "2025-01-01T00:00:00Z")

        entry = updated[PROXY_ADDR]
        self.assertEqual(entry["fetchedAt"], "2025-01-01T00:00:00Z")
        self.assertEqual(entry["address"], PROXY_ADDR)
        self.assertEqual(entry["contractName"], "Token")
        self.assertEqual(entry["directory"], "Token")
        self.assertEqual(entry["files"], ["Token.sol"])
        self.assertEqual(entry["abi"], SAMPLE_ABI)
        self.assertEqual(entry["metadata"], {
            "contractName": "Token",
            "compilerVersion": "v0.8.19+commit.7dd6d404",
            "optimizationUsed": True,
            "runs": 200,
            "evmVersion": "paris",
            "licenseType": "MIT",
            "proxy": False,
            "implementation": None,
            "constructorArguments": "",
        })

    def test_upsert_twice_keeps_one_entry(self):
        first = manifest.upsert({}, PROXY_ADDR, make_entry(), clock=lambda: "2025-01-01T00:00:00Z")
        second = manifest.upsert(first, PROXY_ADDR, make_entry(), clock=lambda: "2025-01-02T00:00:00Z")

        self.assertEqual(list(second), [PROXY_ADDR])
        a, b = dict(first[PROXY_ADDR]), dict(second[PROXY_ADDR])
        self.assertNotEqual(a.pop("fetchedAt"), b.pop("fetchedAt"))
        self.assertEqual(a, b)

    def test_upsert_replaces_wholesale(self):
        old = {PROXY_ADDR: {"address": PROXY_ADDR, "files": ["Old.sol"], "note": "stale"}}
        updated = manifest.upsert(old, PROXY_ADDR, make_entry())

        self.assertNotIn("note", updated[PROXY_ADDR])
        self.assertEqual(updated[PROXY_ADDR]["files"], ["Token.sol"])
        self.assertEqual(old[PROXY_ADDR]["files"], ["Old.sol"])

    def test_upsert_keeps_other_addresses(self):
        first = manifest.upsert({}, PROXY_ADDR, make_entry())
        second = manifest.upsert(first, IMPL_ADDR, make_entry(IMPL_ADDR))
        self.assertEqual(set(second), {PROXY_ADDR, IMPL_ADDR})

    def test_default_clock_is_utc_iso(self):
        updated = manifest.upsert({}, PROXY_ADDR, make_entry())
        self.assertTrue(updated[PROXY_ADDR]["fetchedAt"].endswith("Z"))

    def test_persist_then_load(self):
        data = manifest.upsert({}, PROXY_ADDR, make_entry(), clock=lambda: "2025-01-01T00:00:00Z")
        manifest.persist(data, self.location)

        with open(self.location) as f:
            text = f.read()
        self.assertIn('\n  "0x1111111111111111111111111111111111111111": {', text)
        self.assertEqual(manifest.load(self.location), data)

    def test_build_entry_unknown_directory(self):
        entry = manifest.build_entry(PROXY_ADDR, make_record(ContractName=""), "", ["Contract.sol"])
        self.assertIsInstance(entry, ManifestEntry)
        self.assertEqual(entry.directory, "UnknownContract")


if __name__ == "__main__":
    unittest.main()
