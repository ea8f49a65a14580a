"""Auth Flows - signup, login and logout."""

from ticketapp.auth.flows import DEMO_PASSWORD, DEMO_USERNAME, AuthFlows

__all__ = [
    "DEMO_PASSWORD",
    "DEMO_USERNAME",
    "AuthFlows",
]
