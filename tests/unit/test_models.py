"""
Unit tests for the configuration models.
"""

import pytest
from pydantic import ValidationError

from colb.core.models.config import (
    BuildConfiguration,
    BuildType,
    ColbConfig,
    EventHandlers,
)
from colb.services.command.args import ArgStack


class TestDefaults:
    def test_upstream_profile(self):
        profile = ColbConfig().upstream

        assert profile.mixins == ["compile-commands", "ninja", "mold", "ccache"]
        assert profile.parallel_jobs == 8
        assert profile.build_type is BuildType.DEBUG
        assert profile.build_tests is False
        assert profile.event_handlers == EventHandlers()

    def test_package_profile(self):
        profile = ColbConfig().package

        assert profile.build_tests is True
        assert profile.event_handlers == EventHandlers.compile_logs_only()

    def test_profiles_are_independent(self):
        config = ColbConfig()
        config.package.mixins.append("extra")

        assert "extra" not in config.upstream.mixins
        assert "extra" not in ColbConfig().package.mixins

    def test_parallel_jobs_must_be_positive(self):
        with pytest.raises(ValidationError):
            BuildConfiguration(parallel_jobs=0)


class TestEventHandlers:
    def test_apply_order(self):
        args = ArgStack()
        EventHandlers(desktop_notification=True).apply(args)

        assert args.to_list() == [
            "--event-handlers",
            "summary+",
            "console_start_end+",
            "console_cohesion-",
            "desktop_notification+",
        ]

    def test_silent(self):
        handlers = EventHandlers.silent()

        assert not any(
            [
                handlers.summary,
                handlers.console_start_end,
                handlers.console_cohesion,
                handlers.desktop_notification,
            ]
        )


class TestWithOverrides:
    """Command-line overrides applied on top of the loaded config."""

    def test_no_overrides_is_equal_copy(self):
        config = ColbConfig()
        copy = config.with_overrides()

        assert copy == config
        assert copy is not config

    def test_skip_tests_turns_off_both_profiles(self):
        config = ColbConfig()

        overridden = config.with_overrides(skip_tests=True)

        assert overridden.upstream.build_tests is False
        assert overridden.package.build_tests is False
        assert config.package.build_tests is True

    def test_build_type_only_affects_package_profile(self):
        config = ColbConfig()

        overridden = config.with_overrides(build_type=BuildType.RELEASE)

        assert overridden.package.build_type is BuildType.RELEASE
        assert overridden.upstream.build_type is BuildType.DEBUG
        assert config.package.build_type is BuildType.DEBUG

    def test_build_type_from_string(self):
        overridden = ColbConfig().with_overrides(build_type="RelWithDebInfo")

        assert overridden.package.build_type is BuildType.REL_WITH_DEB_INFO
