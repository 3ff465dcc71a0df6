from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from lexiflow.application.analytics.use_cases.learner_statistics_use_case import (
    LearnerStatisticsUseCase,
)
from lexiflow.application.analytics.use_cases.word_analytics_use_case import (
    WordAnalyticsUseCase,
)
from lexiflow.application.dictionary.use_cases.category_use_case import CategoryUseCase
from lexiflow.application.dictionary.use_cases.word_list_use_case import WordListUseCase
from lexiflow.application.dictionary.use_cases.word_use_case import WordUseCase
from lexiflow.application.identity.use_cases.authentication_use_case import AuthenticationUseCase
from lexiflow.application.identity.use_cases.learner_profile_use_case import (
    LearnerProfileUseCase,
)
from lexiflow.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from lexiflow.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from lexiflow.application.practice.services.exercise_planner import ExercisePlanner
from lexiflow.application.practice.use_cases.difficulty_assessment_use_case import (
    DifficultyAssessmentUseCase,
)
from lexiflow.application.practice.use_cases.exercise_use_case import ExerciseUseCase
from lexiflow.application.practice.use_cases.learning_session_use_case import (
    LearningSessionUseCase,
)
from lexiflow.application.practice.use_cases.practice_attempt_use_case import (
    PracticeAttemptUseCase,
)
from lexiflow.application.practice.use_cases.srs_review_use_case import SrsReviewUseCase
from lexiflow.application.vocabulary.use_cases.user_dictionary_use_case import (
    UserDictionaryUseCase,
)
from lexiflow.application.vocabulary.use_cases.user_list_use_case import UserListUseCase
from lexiflow.domain.practice.services.difficulty_assessor import DifficultyAssessor
from lexiflow.infrastructure.dictionary.repositories.word_list_repository import (
    CategoryRepository,
    WordListRepository,
)
from lexiflow.infrastructure.dictionary.repositories.word_repository import WordRepository
from lexiflow.infrastructure.identity.repositories.user_repository import UserRepository
from lexiflow.infrastructure.identity.services.password_service import get_password_service
from lexiflow.infrastructure.identity.services.token_service import get_token_service
from lexiflow.infrastructure.practice.repositories.daily_progress_repository import (
    DailyProgressRepository,
)
from lexiflow.infrastructure.practice.repositories.learning_mistake_repository import (
    LearningMistakeRepository,
)
from lexiflow.infrastructure.practice.repositories.learning_session_repository import (
    LearningSessionRepository,
)
from lexiflow.infrastructure.vocabulary.repositories.user_list_repository import (
    UserListRepository,
)
from lexiflow.infrastructure.vocabulary.repositories.user_word_repository import (
    UserWordRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    word_repository = providers.Factory(WordRepository, db=db)
    word_list_repository = providers.Factory(WordListRepository, db=db)
    category_repository = providers.Factory(CategoryRepository, db=db)
    user_word_repository = providers.Factory(UserWordRepository, db=db)
    user_list_repository = providers.Factory(UserListRepository, db=db)
    learning_session_repository = providers.Factory(LearningSessionRepository, db=db)
    learning_mistake_repository = providers.Factory(LearningMistakeRepository, db=db)
    daily_progress_repository = providers.Factory(DailyProgressRepository, db=db)

    # Identity repositories and services
    user_repository = providers.Factory(UserRepository, db=db)
    password_service = providers.Singleton(get_password_service)
    token_service = providers.Singleton(get_token_service)

    # Stateless practice services
    exercise_planner = providers.Factory(ExercisePlanner)
    difficulty_assessor = providers.Factory(DifficultyAssessor)

    # Identity module
    authentication_use_case = providers.Factory(
        AuthenticationUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    register_user_use_case = providers.Factory(
        RegisterUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
    )
    update_user_use_case = providers.Factory(
        UpdateUserUseCase,
        user_repository=user_repository,
        password_service=password_service,
    )
    learner_profile_use_case = providers.Factory(
        LearnerProfileUseCase, user_repository=user_repository
    )

    # Dictionary module
    word_use_case = providers.Factory(WordUseCase, word_repository=word_repository)
    category_use_case = providers.Factory(CategoryUseCase, category_repository=category_repository)
    word_list_use_case = providers.Factory(
        WordListUseCase,
        word_list_repository=word_list_repository,
        word_repository=word_repository,
        category_repository=category_repository,
    )

    # Vocabulary module
    user_dictionary_use_case = providers.Factory(
        UserDictionaryUseCase,
        user_word_repository=user_word_repository,
        word_repository=word_repository,
    )
    user_list_use_case = providers.Factory(
        UserListUseCase,
        user_list_repository=user_list_repository,
        user_word_repository=user_word_repository,
        word_list_repository=word_list_repository,
    )

    # Practice module
    learning_session_use_case = providers.Factory(
        LearningSessionUseCase,
        session_repository=learning_session_repository,
        user_word_repository=user_word_repository,
        user_list_repository=user_list_repository,
        word_list_repository=word_list_repository,
        daily_progress_repository=daily_progress_repository,
        exercise_planner=exercise_planner,
        difficulty_assessor=difficulty_assessor,
    )
    practice_attempt_use_case = providers.Factory(
        PracticeAttemptUseCase,
        session_repository=learning_session_repository,
        user_word_repository=user_word_repository,
        mistake_repository=learning_mistake_repository,
        daily_progress_repository=daily_progress_repository,
        exercise_planner=exercise_planner,
    )
    srs_review_use_case = providers.Factory(
        SrsReviewUseCase, user_word_repository=user_word_repository
    )
    exercise_use_case = providers.Factory(
        ExerciseUseCase,
        user_word_repository=user_word_repository,
        exercise_planner=exercise_planner,
    )
    difficulty_assessment_use_case = providers.Factory(
        DifficultyAssessmentUseCase,
        user_word_repository=user_word_repository,
        session_repository=learning_session_repository,
        difficulty_assessor=difficulty_assessor,
    )

    # Analytics module
    word_analytics_use_case = providers.Factory(
        WordAnalyticsUseCase,
        user_word_repository=user_word_repository,
        session_repository=learning_session_repository,
        mistake_repository=learning_mistake_repository,
    )
    learner_statistics_use_case = providers.Factory(
        LearnerStatisticsUseCase,
        user_repository=user_repository,
        user_word_repository=user_word_repository,
        session_repository=learning_session_repository,
        mistake_repository=learning_mistake_repository,
    )


container = Container()
