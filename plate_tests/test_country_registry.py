import tempfile
import unittest
from pathlib import Path

from platekit.countries import (
    CountryRegistry,
    DefaultPlatePolicy,
    ProfilePlatePolicy,
    default_registry,
    list_country_profiles,
    load_country_profiles,
)
from platekit.countries.registry import DEFAULT_CONFIG_DIR
from platekit.errors import InvalidArgument

ALPHA_YAML = """
name: Alpha
code: al
priority: 5
license_plate_formats:
  - name: plain
    regex: "^[A-Z]{2}-[0-9]{2}$"
"""

BETA_YAML = """
name: Beta
code: BT
priority: 1
"""


class LoadCountryProfilesTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_dir = Path(self._tmp.name)
        (self.config_dir / "alpha.yaml").write_text(ALPHA_YAML, encoding="utf-8")
        (self.config_dir / "beta.yaml").write_text(BETA_YAML, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_profiles_sorted_by_priority(self) -> None:
        profiles = load_country_profiles(self.config_dir)
        self.assertEqual([p.code for p in profiles], ["BT", "AL"])

    def test_broken_file_is_skipped_with_warning(self) -> None:
        (self.config_dir / "broken.yaml").write_text("code: [unclosed", encoding="utf-8")
        (self.config_dir / "bad_regex.yaml").write_text(
            'code: BR\nlicense_plate_formats:\n  - regex: "(["\n', encoding="utf-8"
        )
        (self.config_dir / "looping.yaml").write_text(
            "code: LP\ntransliteration:\n  A: AE\n", encoding="utf-8"
        )
        with self.assertLogs("platekit.countries.registry", level="WARNING") as logs:
            profiles = load_country_profiles(self.config_dir)
        self.assertEqual([p.code for p in profiles], ["BT", "AL"])
        self.assertEqual(len(logs.records), 3)

    def test_missing_directory(self) -> None:
        with self.assertLogs("platekit.countries.registry", level="WARNING"):
            self.assertEqual(load_country_profiles(self.config_dir / "missing"), [])

    def test_list_country_profiles(self) -> None:
        self.assertEqual(
            list_country_profiles(self.config_dir),
            [{"code": "BT", "name": "Beta"}, {"code": "AL", "name": "Alpha"}],
        )

    def test_registry_from_dir(self) -> None:
        registry = CountryRegistry.load_from_dir(self.config_dir)
        self.assertEqual(registry.codes(), ["BT", "AL", "XX"])
        self.assertIsInstance(registry.get("al"), ProfilePlatePolicy)
        self.assertIsInstance(registry.get("XX"), DefaultPlatePolicy)
        self.assertEqual(len(registry), 3)

    def test_registry_enabled_filter(self) -> None:
        registry = CountryRegistry.load_from_dir(self.config_dir, enabled=["al"])
        self.assertEqual(registry.codes(), ["AL", "XX"])
        self.assertNotIn("BT", registry)


class CountryRegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = CountryRegistry([DefaultPlatePolicy()])

    def test_get_is_case_insensitive(self) -> None:
        self.assertIs(self.registry.get(" xx "), self.registry.get("XX"))
        self.assertIsNone(self.registry.get("DE"))
        self.assertIsNone(self.registry.get(None))

    def test_require(self) -> None:
        self.assertEqual(self.registry.require("xx").code, "XX")
        for code in (None, "", "  ", "DE"):
            with self.subTest(code=code):
                with self.assertRaises(InvalidArgument):
                    self.registry.require(code)

    def test_contains(self) -> None:
        self.assertIn("xx", self.registry)
        self.assertNotIn("DE", self.registry)
        self.assertNotIn(1, self.registry)

    def test_metadata(self) -> None:
        self.assertEqual(self.registry.to_metadata(), [{"code": "XX", "name": "Default"}])


class DefaultRegistryTests(unittest.TestCase):
    def test_bundled_countries(self) -> None:
        registry = default_registry()
        self.assertEqual(registry.codes(), ["DE", "NL", "BE", "FR", "PL", "CH", "XX"])

    def test_default_registry_is_shared(self) -> None:
        self.assertIs(default_registry(), default_registry())
        self.assertIs(default_registry().get("DE"), default_registry().get("de"))

    def test_bundled_config_dir_exists(self) -> None:
        self.assertTrue(DEFAULT_CONFIG_DIR.is_dir())


if __name__ == "__main__":
    unittest.main()
