"""
Command line assembly for the external build and test tools.
"""

from .args import ArgStack
from .builder import (
    BasicVerb,
    BuildVerb,
    ColconInvocation,
    ConfiguredBuild,
    DependenciesFor,
    FinalizedCommand,
    ThesePackages,
    ctest_single,
    ninja_build_target,
)

__all__ = [
    "ArgStack",
    "BasicVerb",
    "BuildVerb",
    "ColconInvocation",
    "ConfiguredBuild",
    "DependenciesFor",
    "FinalizedCommand",
    "ThesePackages",
    "ctest_single",
    "ninja_build_target",
]
