"""Execution gates for diaglog.

Re-exports the gate ABC, both built-in gates and the call-site helpers::

    from diaglog.gates import PeriodicGate, SamplingGate, every_n, periodic
"""

from diaglog.gates.base import Gate
from diaglog.gates.callsite import CallSiteRegistry, every_n, periodic, reset_call_sites
from diaglog.gates.periodic import PeriodicGate
from diaglog.gates.sampling import SamplingGate

__all__ = [
    "CallSiteRegistry",
    "Gate",
    "PeriodicGate",
    "SamplingGate",
    "every_n",
    "periodic",
    "reset_call_sites",
]
