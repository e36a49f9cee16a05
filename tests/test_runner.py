"""
Tests for operation dispatch: parameter validation, request building,
per-operation success rules and publishing to the shared context.
"""

import unittest
from unittest.mock import Mock

from github_api_actions.config_models import ClientSettings
from github_api_actions.core.runner import ActionRunner
from github_api_actions.errors import InvalidArgument, RemoteError, UnknownOperation
from github_api_actions.http.response import ApiResponse
from github_api_actions.operations import register_all
from github_api_actions.operations.base import REACTIONS_PREVIEW
from github_api_actions.state.context import SharedContext

SERVER = "https://api.github.com"
REPO = {"repo_owner": "octocat", "repo_name": "Hello-World"}


class RunnerTestCase(unittest.TestCase):
    def setUp(self):
        register_all()
        self.client = Mock()
        self.client.perform.return_value = ApiResponse(status=200, body="{}", json={})
        self.context = SharedContext()
        self.runner = ActionRunner(
            client=self.client,
            settings=ClientSettings(api_token="t0ken"),
            context=self.context,
        )

    def respond(self, status, body="", json=None):
        self.client.perform.return_value = ApiResponse(status=status, body=body, json=json)

    def sent(self):
        args, kwargs = self.client.perform.call_args
        method, path, token, server_url = args
        return method, path, token, server_url, kwargs["params"], kwargs["headers"]


class TestCreateIssue(RunnerTestCase):
    def test_create_issue_scenario(self):
        self.respond(201, '{"number":42}', {"number": 42, "title": "Found a bug", "state": "open"})

        result = self.runner.run("github_create_issue", title="Found a bug", **REPO)

        self.assertEqual(result.status, 201)
        self.assertEqual(result.json["number"], 42)
        method, path, token, server_url, params, headers = self.sent()
        self.assertEqual(method, "POST")
        self.assertEqual(path, "/repos/octocat/Hello-World/issues")
        self.assertEqual(token, "t0ken")
        self.assertEqual(server_url, SERVER)
        self.assertEqual(params, {"title": "Found a bug"})
        self.assertIsNone(headers)

    def test_results_are_published_to_context(self):
        self.respond(201, '{"number":42}', {"number": 42})
        self.runner.run("github_create_issue", title="Found a bug", **REPO)

        self.assertEqual(self.context["GITHUB_CREATE_ISSUE_STATUS_CODE"], 201)
        self.assertEqual(self.context["GITHUB_CREATE_ISSUE_RESPONSE"], '{"number":42}')
        self.assertEqual(self.context["GITHUB_CREATE_ISSUE_JSON"], {"number": 42})

    def test_missing_title_fails_before_network(self):
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_create_issue", **REPO)
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_create_issue", title="", **REPO)
        self.client.perform.assert_not_called()

    def test_missing_repo_owner_fails_before_network(self):
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_create_issue", repo_name="Hello-World", title="x")
        self.client.perform.assert_not_called()

    def test_unknown_parameter_is_rejected(self):
        with self.assertRaises(InvalidArgument) as cm:
            self.runner.run("github_create_issue", title="x", priority="high", **REPO)
        self.assertIn("priority", str(cm.exception))
        self.client.perform.assert_not_called()

    def test_remote_error_uses_api_message(self):
        self.respond(422, '{"message":"Validation Failed"}', {"message": "Validation Failed"})

        with self.assertRaises(RemoteError) as cm:
            self.runner.run("github_create_issue", title="x", **REPO)

        self.assertEqual(cm.exception.status, 422)
        self.assertEqual(cm.exception.message, "Validation Failed")
        self.assertEqual(len(self.context), 0)

    def test_transport_failure_is_reported_as_remote_error(self):
        self.respond(0, "Connection reset by peer")

        with self.assertRaises(RemoteError) as cm:
            self.runner.run("github_create_issue", title="x", **REPO)

        self.assertEqual(cm.exception.status, 0)
        self.assertIn("Connection reset by peer", str(cm.exception))


class TestCredentials(RunnerTestCase):
    def test_per_call_token_and_server_override_settings(self):
        self.runner.run("github_get_issue", issue_number=1, api_token="other", server_url="https://ghe.local/api/v3", **REPO)
        _, _, token, server_url, _, _ = self.sent()
        self.assertEqual(token, "other")
        self.assertEqual(server_url, "https://ghe.local/api/v3")

    def test_missing_token_fails_before_network(self):
        runner = ActionRunner(client=self.client, settings=ClientSettings(api_token=""), context=self.context)
        with self.assertRaises(InvalidArgument):
            runner.run("github_get_issue", issue_number=1, **REPO)
        self.client.perform.assert_not_called()

    def test_unknown_operation(self):
        with self.assertRaises(UnknownOperation):
            self.runner.run("github_fork_everything", **REPO)


class TestCheckPullMerged(RunnerTestCase):
    def test_no_content_means_merged(self):
        self.respond(204)
        result = self.runner.run("github_check_pull_merged", pull_number=1, repo_owner="o", repo_name="r")

        self.assertTrue(result.extras["merged"])
        self.assertIsNone(result.json)
        self.assertTrue(self.context["GITHUB_PULL_IS_MERGED"])
        _, path, _, _, params, _ = self.sent()
        self.assertEqual(path, "/repos/o/r/pulls/1/merge")
        self.assertIsNone(params)

    def test_not_found_means_not_merged(self):
        self.respond(404, '{"message":"Not Found"}', {"message": "Not Found"})
        result = self.runner.run("github_check_pull_merged", pull_number=1, repo_owner="o", repo_name="r")

        self.assertFalse(result.extras["merged"])
        self.assertFalse(self.context["GITHUB_PULL_IS_MERGED"])

    def test_server_error_is_raised(self):
        self.respond(500, "oops")
        with self.assertRaises(RemoteError):
            self.runner.run("github_check_pull_merged", pull_number=1, repo_owner="o", repo_name="r")


class TestParameterHandling(RunnerTestCase):
    def test_label_color_hash_is_stripped(self):
        self.respond(201, "{}", {})
        self.runner.run("github_create_label", name="bug", color="#d73a4a", **REPO)
        _, _, _, _, params, _ = self.sent()
        self.assertEqual(params, {"name": "bug", "color": "d73a4a"})

    def test_label_names_are_encoded_in_path(self):
        self.runner.run("github_remove_label", issue_number=7, label_name="needs review", **REPO)
        _, path, _, _, _, _ = self.sent()
        self.assertEqual(path, "/repos/octocat/Hello-World/issues/7/labels/needs%20review")

    def test_update_label_renames_via_path_and_body(self):
        self.runner.run("github_update_label", name="good first issue", new_name="starter", **REPO)
        method, path, _, _, params, _ = self.sent()
        self.assertEqual(method, "PATCH")
        self.assertEqual(path, "/repos/octocat/Hello-World/labels/good%20first%20issue")
        self.assertEqual(params, {"new_name": "starter"})

    def test_list_issues_query(self):
        self.respond(200, "[]", [])
        self.runner.run("github_list_issues", state="open", labels=["bug", "ui"], per_page="50", **REPO)
        method, path, _, _, params, _ = self.sent()
        self.assertEqual(method, "GET")
        self.assertEqual(path, "/repos/octocat/Hello-World/issues")
        self.assertEqual(params, {"state": "open", "labels": "bug,ui", "per_page": 50})

    def test_get_without_filters_sends_no_params(self):
        self.runner.run("github_list_repo_labels", **REPO)
        _, _, _, _, params, _ = self.sent()
        self.assertIsNone(params)

    def test_choices_are_enforced(self):
        with self.assertRaises(InvalidArgument) as cm:
            self.runner.run("github_lock_issue", issue_number=3, lock_reason="angry", **REPO)
        self.assertIn("off-topic", str(cm.exception))
        self.client.perform.assert_not_called()

    def test_lock_without_reason_sends_empty_body(self):
        self.respond(204)
        self.runner.run("github_lock_issue", issue_number=3, **REPO)
        method, path, _, _, params, _ = self.sent()
        self.assertEqual(method, "PUT")
        self.assertEqual(path, "/repos/octocat/Hello-World/issues/3/lock")
        self.assertEqual(params, {})

    def test_integer_parameters_reject_text(self):
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_get_issue", issue_number="forty-two", **REPO)

    def test_boolean_parameters_accept_strings(self):
        self.respond(201, "{}", {})
        self.runner.run("github_create_pull", title="t", head="feature", base="main", draft="true", **REPO)
        _, _, _, _, params, _ = self.sent()
        self.assertIs(params["draft"], True)

    def test_empty_reviewer_lists_are_omitted(self):
        self.respond(201, "{}", {})
        self.runner.run("github_request_pull_review", pull_number=5, reviewers=["hubot"], team_reviewers=[], **REPO)
        _, path, _, _, params, _ = self.sent()
        self.assertEqual(path, "/repos/octocat/Hello-World/pulls/5/requested_reviewers")
        self.assertEqual(params, {"reviewers": ["hubot"]})

    def test_empty_review_comments_are_omitted(self):
        self.respond(200, "{}", {})
        self.runner.run("github_submit_pull_review", pull_number=5, event="APPROVE", comments=[], **REPO)
        _, _, _, _, params, _ = self.sent()
        self.assertEqual(params, {"event": "APPROVE"})

    def test_empty_lists_clear_issue_fields(self):
        self.runner.run("github_update_issue", issue_number=1, labels=[], assignees=[], **REPO)
        method, path, _, _, params, _ = self.sent()
        self.assertEqual(method, "PATCH")
        self.assertEqual(path, "/repos/octocat/Hello-World/issues/1")
        self.assertEqual(params, {"labels": [], "assignees": []})

    def test_required_lists_must_not_be_empty(self):
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_add_labels", issue_number=1, labels=[], **REPO)
        self.client.perform.assert_not_called()


class TestPullComments(RunnerTestCase):
    def test_comment_needs_anchor_or_reply(self):
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_create_pull_comment", pull_number=2, body="nit", **REPO)
        self.client.perform.assert_not_called()

    def test_anchored_comment(self):
        self.respond(201, "{}", {})
        self.runner.run(
            "github_create_pull_comment",
            pull_number=2,
            body="nit",
            commit_id="abc123",
            path="src/app.py",
            line=10,
            side="RIGHT",
            **REPO,
        )
        _, _, _, _, params, _ = self.sent()
        self.assertEqual(
            params,
            {"body": "nit", "commit_id": "abc123", "path": "src/app.py", "line": 10, "side": "RIGHT"},
        )

    def test_reply_drops_line_fields(self):
        self.respond(201, "{}", {})
        self.runner.run(
            "github_create_pull_comment",
            pull_number=2,
            body="agreed",
            commit_id="abc123",
            path="src/app.py",
            in_reply_to=99,
            **REPO,
        )
        _, _, _, _, params, _ = self.sent()
        self.assertEqual(params, {"body": "agreed", "in_reply_to": 99})


class TestReactions(RunnerTestCase):
    def test_preview_accept_header_is_sent(self):
        self.respond(201, "{}", {"content": "heart"})
        self.runner.run("github_create_issue_reaction", issue_number=4, content="heart", **REPO)
        _, path, _, _, params, headers = self.sent()
        self.assertEqual(path, "/repos/octocat/Hello-World/issues/4/reactions")
        self.assertEqual(params, {"content": "heart"})
        self.assertEqual(headers, {"Accept": REACTIONS_PREVIEW})

    def test_invalid_reaction_content(self):
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_create_issue_reaction", issue_number=4, content="party", **REPO)

    def test_comment_reaction_delete_requires_no_content(self):
        self.respond(204)
        self.runner.run("github_delete_issue_comment_reaction", comment_id=1, reaction_id=2, **REPO)

        self.respond(200, "{}", {})
        with self.assertRaises(RemoteError):
            self.runner.run("github_delete_issue_comment_reaction", comment_id=1, reaction_id=2, **REPO)


class TestRepositories(RunnerTestCase):
    def test_create_user_repository(self):
        self.respond(201, "{}", {"full_name": "octocat/demo"})
        self.runner.run("github_create_repository", name="demo", private=True)
        method, path, _, _, params, _ = self.sent()
        self.assertEqual(method, "POST")
        self.assertEqual(path, "/user/repos")
        self.assertEqual(params, {"name": "demo", "private": True})

    def test_create_org_repository(self):
        self.respond(201, "{}", {})
        self.runner.run("github_create_repository", name="demo", organization="acme")
        _, path, _, _, params, _ = self.sent()
        self.assertEqual(path, "/orgs/acme/repos")
        self.assertNotIn("organization", params)

    def test_delete_requires_confirmation(self):
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_delete_repository", **REPO)
        with self.assertRaises(InvalidArgument):
            self.runner.run("github_delete_repository", confirm=False, **REPO)
        self.client.perform.assert_not_called()

    def test_confirmed_delete(self):
        self.respond(204)
        result = self.runner.run("github_delete_repository", confirm=True, **REPO)
        method, path, _, _, params, _ = self.sent()
        self.assertEqual(result.status, 204)
        self.assertEqual(method, "DELETE")
        self.assertEqual(path, "/repos/octocat/Hello-World")
        self.assertIsNone(params)


if __name__ == "__main__":
    unittest.main()
