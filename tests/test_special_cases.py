"""
Tests for the special-case identifier registry.
Run from project root: python -m pytest tests/test_special_cases.py -v
"""
import unittest

from utils.special_cases import DEFAULT_REGISTRY, SAML_FIELDS, Direction, SpecialCaseRegistry


class TestSpecialCaseRegistry(unittest.TestCase):
    def test_lookup_both_directions(self):
        self.assertEqual(DEFAULT_REGISTRY.lookup("spNameIDFormat", Direction.CAMEL_TO_SNAKE), "sp_name_id_format")
        self.assertEqual(DEFAULT_REGISTRY.lookup("sp_name_id_format", Direction.SNAKE_TO_CAMEL), "spNameIDFormat")

    def test_key_already_in_target_form_maps_to_itself(self):
        self.assertEqual(DEFAULT_REGISTRY.lookup("sp_name_id_format", Direction.CAMEL_TO_SNAKE), "sp_name_id_format")
        self.assertEqual(DEFAULT_REGISTRY.lookup("spNameIDFormat", Direction.SNAKE_TO_CAMEL), "spNameIDFormat")

    def test_exact_match_only(self):
        self.assertIsNone(DEFAULT_REGISTRY.lookup("spnameidformat", Direction.CAMEL_TO_SNAKE))
        self.assertIsNone(DEFAULT_REGISTRY.lookup("SP_NAME_ID_FORMAT", Direction.SNAKE_TO_CAMEL))
        self.assertIsNone(DEFAULT_REGISTRY.lookup("config_sp_name_id_format", Direction.SNAKE_TO_CAMEL))
        self.assertIsNone(DEFAULT_REGISTRY.lookup("user_name", Direction.SNAKE_TO_CAMEL))

    def test_non_string_key(self):
        self.assertIsNone(DEFAULT_REGISTRY.lookup(7, Direction.SNAKE_TO_CAMEL))

    def test_pairs_and_membership(self):
        self.assertEqual(sorted(DEFAULT_REGISTRY.pairs()), sorted(SAML_FIELDS))
        self.assertEqual(len(DEFAULT_REGISTRY), len(SAML_FIELDS))
        self.assertIn("idpEntityId", DEFAULT_REGISTRY)
        self.assertIn("idp_entity_id", DEFAULT_REGISTRY)
        self.assertNotIn("userName", DEFAULT_REGISTRY)

    def test_custom_registry(self):
        registry = SpecialCaseRegistry([("oAuthToken", "oauth_token")])
        self.assertEqual(registry.lookup("oauth_token", Direction.SNAKE_TO_CAMEL), "oAuthToken")
        self.assertIsNone(registry.lookup("spNameIDFormat", Direction.CAMEL_TO_SNAKE))

    def test_conflicting_pairs_rejected(self):
        with self.assertRaises(ValueError):
            SpecialCaseRegistry([("fooBar", "foo_bar"), ("fooBar", "foobar")])
        with self.assertRaises(ValueError):
            SpecialCaseRegistry([("fooBar", "foo_bar"), ("fooBAR", "foo_bar")])


if __name__ == "__main__":
    unittest.main()
