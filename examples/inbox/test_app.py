"""Tests for the inbox example."""


class TestInbox:
    def test_first_visit_goes_home(self, example_module) -> None:
        example_module.router.start()
        assert example_module.location.fragment == "/"
        assert example_module.views == ["inbox page 1"]

    def test_mail_runs_every_matching_route(self, example_module) -> None:
        example_module.router.start()
        example_module.location.assign("/mail/42?view=raw")
        assert example_module.views[-2:] == ["mail 42 as raw", "marked 42 read"]

    def test_legacy_thread_redirects(self, example_module) -> None:
        example_module.router.start()
        example_module.location.assign("/thread-7")
        assert example_module.location.fragment == "/mail/7"
        assert example_module.views[-1] == "marked 7 read"

    def test_compose_decodes_query(self, example_module) -> None:
        example_module.router.start()
        example_module.location.assign("/compose?to=ada%40example.com")
        assert example_module.views[-1] == "compose to ada@example.com"

    def test_unknown_page_is_not_redirected_after_start(self, example_module) -> None:
        example_module.router.start()
        example_module.location.assign("/nowhere")
        assert example_module.location.fragment == "/nowhere"
