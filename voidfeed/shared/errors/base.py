# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, cast


class FaultClass(StrEnum):
    """Coarse failure classification the HTTP layer maps to a status code."""

    CLIENT_INPUT = "client_input"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    SERVER = "server"


@dataclass(slots=True)
class AppError(Exception):
    code: str
    fault: FaultClass
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "kind": self.fault.value}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        fault: FaultClass | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_fault = fault or cast(
            FaultClass, getattr(self, "fault", FaultClass.CLIENT_INPUT)
        )
        super().__init__(code=resolved_code, fault=resolved_fault, context=context)


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(code=code, fault=FaultClass.SERVER, context=context)


ServerFault = InfrastructureError


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            fault=FaultClass.CLIENT_INPUT,
            context=context,
        )


def missing_fields_error(*fields: str) -> ValidationError:
    return ValidationError(
        context={
            "fields": sorted(fields),
            "errors": [{"field": name, "type": "missing"} for name in fields],
        }
    )
