"""
Contract tests for the operation table.
Ensures every registered operation is well formed.
"""

import string
import unittest

from github_api_actions.core.models import BODY, OPTION, PATH, QUERY
from github_api_actions.errors import UnknownOperation
from github_api_actions.operations import get, get_registered_operations, register_all
from github_api_actions.http.client import SUPPORTED_METHODS


class TestOperationContracts(unittest.TestCase):
    """Test that all operations satisfy their contracts."""

    def setUp(self):
        register_all()

    def test_all_operations_are_registered(self):
        names = {spec.name for spec in get_registered_operations()}
        self.assertEqual(len(names), 55)
        for expected in (
            "github_create_issue",
            "github_check_pull_merged",
            "github_create_issue_reaction",
            "github_create_repository",
            "github_update_milestone",
        ):
            self.assertIn(expected, names)

    def test_names_and_methods(self):
        for spec in get_registered_operations():
            self.assertTrue(spec.name.startswith("github_"), spec.name)
            self.assertIn(spec.method, SUPPORTED_METHODS, spec.name)
            self.assertTrue(spec.path.startswith("/"), spec.name)
            self.assertTrue(spec.description, spec.name)

    def test_path_placeholders_match_path_params(self):
        for spec in get_registered_operations():
            placeholders = {field for _, field, _, _ in string.Formatter().parse(spec.path) if field}
            path_params = {p.name for p in spec.params if p.location == PATH}
            self.assertEqual(placeholders, path_params, spec.name)
            for p in spec.params:
                if p.location == PATH:
                    self.assertTrue(p.required, f"{spec.name}.{p.name}")

    def test_param_names_unique_and_locations_valid(self):
        for spec in get_registered_operations():
            names = [p.name for p in spec.params]
            self.assertEqual(len(names), len(set(names)), spec.name)
            for p in spec.params:
                self.assertIn(p.location, {BODY, QUERY, PATH, OPTION}, f"{spec.name}.{p.name}")
                self.assertNotIn(p.name, {"api_token", "server_url"}, spec.name)

    def test_get_operations_send_no_body(self):
        for spec in get_registered_operations():
            if spec.method == "GET":
                self.assertFalse([p for p in spec.params if p.location == BODY], spec.name)

    def test_context_prefix(self):
        self.assertEqual(get("github_create_issue").context_prefix, "GITHUB_CREATE_ISSUE")
        self.assertEqual(get("github_list_pulls").context_prefix, "GITHUB_LIST_PULLS")

    def test_success_rules(self):
        self.assertTrue(get("github_get_issue").success(200))
        self.assertFalse(get("github_get_issue").success(404))
        self.assertTrue(get("github_check_pull_merged").success(404))
        self.assertFalse(get("github_delete_issue_comment_reaction").success(200))
        self.assertTrue(get("github_delete_issue_comment_reaction").success(204))

    def test_unknown_operation_lists_known_ones(self):
        with self.assertRaises(UnknownOperation) as cm:
            get("github_nope")
        self.assertIn("github_create_issue", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
