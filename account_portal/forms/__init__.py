"""Forms for the account pages.

Each form validates with the shared rule set before calling the API.
"""

from .base import BaseForm, FormState, LogNotifier, Notifier
from .login import LoginForm
from .password import PasswordForm
from .profile import ProfileForm

__all__ = [
    "BaseForm",
    "FormState",
    "LogNotifier",
    "Notifier",
    "LoginForm",
    "PasswordForm",
    "ProfileForm",
]
