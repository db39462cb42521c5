# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Regulatory compliance rules and evaluation.
"""

from .evaluator import evaluate_compliance
from .models import (
    Certification,
    ComplianceRule,
    ComplianceStatus,
    Recommendation,
    RegulatoryCompliance,
)
from .rules import get_compliance_rules

__all__ = [
    "Certification",
    "ComplianceRule",
    "ComplianceStatus",
    "Recommendation",
    "RegulatoryCompliance",
    "evaluate_compliance",
    "get_compliance_rules",
]
