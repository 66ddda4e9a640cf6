import os
import unittest
from unittest import mock

from mendel import (
    Bag,
    DEFAULT_MAX_SIMS,
    InvalidConfiguration,
    Settings,
    get_default_max_sims,
    load_settings,
)


class TestSettings(unittest.TestCase):
    """MENDEL_MAX_SIMS overrides the default simulation budget."""

    def test_default_without_override(self):
        """Without MENDEL_MAX_SIMS the default is 100,000."""
        with mock.patch.dict(os.environ, clear=True):
            self.assertEqual(get_default_max_sims(), DEFAULT_MAX_SIMS)
            self.assertEqual(DEFAULT_MAX_SIMS, 100_000)

    def test_env_override(self):
        """MENDEL_MAX_SIMS sets the budget of new Bags."""
        with mock.patch.dict(os.environ, {"MENDEL_MAX_SIMS": "2500"}, clear=True):
            self.assertEqual(load_settings().max_sims, 2500)
            self.assertEqual(Bag.from_range(1, 11).max_sims, 2500)
            self.assertEqual(Bag.from_vec(["x"]).max_sims, 2500)

    def test_env_read_at_construction(self):
        """Each construction sees the environment as it is at that moment."""
        with mock.patch.dict(os.environ, {"MENDEL_MAX_SIMS": "10"}, clear=True):
            first = Bag.from_range(1, 3)
        with mock.patch.dict(os.environ, {"MENDEL_MAX_SIMS": "20"}, clear=True):
            second = Bag.from_range(1, 3)
        self.assertEqual(first.max_sims, 10)
        self.assertEqual(second.max_sims, 20)

    def test_explicit_max_sims_wins(self):
        """An explicit max_sims argument takes precedence over the environment."""
        with mock.patch.dict(os.environ, {"MENDEL_MAX_SIMS": "2500"}, clear=True):
            self.assertEqual(Bag.from_range(1, 11, max_sims=7).max_sims, 7)

    def test_unparseable_override_is_fatal(self):
        """Non-integer or non-positive overrides raise InvalidConfiguration."""
        for value in ("abc", "1.5", "0", "-10"):
            with mock.patch.dict(os.environ, {"MENDEL_MAX_SIMS": value}, clear=True):
                with self.assertRaises(InvalidConfiguration, msg=value):
                    Bag.from_range(1, 11)

    def test_invalid_configuration_is_chained(self):
        """The pydantic validation error is kept as the cause."""
        with mock.patch.dict(os.environ, {"MENDEL_MAX_SIMS": "lots"}, clear=True):
            with self.assertRaises(InvalidConfiguration) as ctx:
                load_settings()
        self.assertIsNotNone(ctx.exception.__cause__)

    def test_settings_direct(self):
        """Settings accepts keyword values directly."""
        self.assertEqual(Settings(max_sims=42).max_sims, 42)


if __name__ == '__main__':
    unittest.main()
