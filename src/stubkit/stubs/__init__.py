"""Stubs – build objects whose constructor dependencies are bare mocks.

Usage::

    from stubkit.stubs import build, create_with_bare_mocks

    service = create_with_bare_mocks(CheckoutService)
    service = build(CheckoutService).with_(FakeGateway()).fill_gaps_with_bare_mocks().finish()
"""
from stubkit.stubs.builder import StubBuilder
from stubkit.stubs.constructor import (
    ConstructorDescriptor,
    ConstructorRegistry,
    ParameterSlot,
    default_registry,
    register_constructor,
    select_constructor,
)
from stubkit.stubs.facade import Stubs, bare_mock, build, create_with_bare_mocks
from stubkit.stubs.ordering import ConstructorParametersComparer
from stubkit.stubs.resolver import BareValueResolver

__all__ = [
    "BareValueResolver",
    "ConstructorDescriptor",
    "ConstructorParametersComparer",
    "ConstructorRegistry",
    "ParameterSlot",
    "StubBuilder",
    "Stubs",
    "bare_mock",
    "build",
    "create_with_bare_mocks",
    "default_registry",
    "register_constructor",
    "select_constructor",
]
