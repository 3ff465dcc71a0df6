from .authentication_use_case import AuthenticationUseCase
from .learner_profile_use_case import LearnerProfileUseCase
from .register_user_use_case import RegisterUserUseCase
from .update_user_use_case import UpdateUserUseCase

__all__ = [
    "AuthenticationUseCase",
    "LearnerProfileUseCase",
    "RegisterUserUseCase",
    "UpdateUserUseCase",
]
