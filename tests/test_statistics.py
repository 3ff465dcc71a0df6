"""Tests for learner statistics endpoints."""

from datetime import UTC, datetime, timedelta

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from lexiflow import models


def add_session(
    db: Session,
    user: models.User,
    started: datetime,
    correct: int = 0,
    incorrect: int = 0,
    response_times: list[tuple[int, int]] | None = None,
    **fields: object,
) -> models.LearningSession:
    """Insert a finished session; ``response_times`` are (user_word_id, ms) items."""
    session = models.LearningSession(
        user_id=user.id,
        session_type=fields.pop("session_type", "practice"),
        start_time=started,
        end_time=started + timedelta(minutes=10),
        correct_answers=correct,
        incorrect_answers=incorrect,
        items=[
            models.SessionItem(user_word_id=user_word_id, is_correct=True, response_time=ms)
            for user_word_id, ms in response_times or []
        ],
        **fields,
    )
    db.add(session)
    db.commit()
    return session


def add_mistake(
    db: Session,
    user_word: models.UserWord,
    created_at: datetime,
    mistake_type: str = "spelling",
) -> None:
    db.add(
        models.LearningMistake(
            user_id=user_word.user_id,
            user_word_id=user_word.id,
            definition_id=user_word.definition_id,
            mistake_type=mistake_type,
            context={},
            created_at=created_at,
        )
    )
    db.commit()


class TestStatistics:
    """Test suite for GET /statistics endpoint."""

    def test_new_learner(self, client: TestClient) -> None:
        response = client.get("/api/v1/statistics")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["learning_progress"]["total_words"] == 0
        assert data["learning_progress"]["current_streak"] == 0
        assert data["sessions"]["total_sessions"] == 0
        assert data["sessions"]["last_session_at"] is None
        assert data["mistakes"]["most_common_type"] is None
        assert data["goal_progress"]["daily_goal"] == 5
        assert data["language_progress"]["base_language_code"] == "ru"
        assert data["language_progress"]["proficiency_level"] == "beginner"

    def test_reflects_practice(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        vocabulary: list[models.UserWord],
    ) -> None:
        now = datetime.now(UTC)
        vocabulary[0].learning_status = "learned"
        vocabulary[0].mastery_score = 100.0
        db_session.commit()
        add_session(db_session, test_user, now, 8, 2, words_studied=10, duration=600)
        add_session(db_session, test_user, now - timedelta(days=1), 3, 1, words_studied=4)
        add_mistake(db_session, vocabulary[1], now)
        add_mistake(db_session, vocabulary[1], now, "meaning")
        add_mistake(db_session, vocabulary[2], now, "meaning")

        data = client.get("/api/v1/statistics").json()

        assert data["learning_progress"]["total_words"] == 5
        assert data["learning_progress"]["words_learned"] == 1
        assert data["learning_progress"]["progress_percentage"] == 20.0
        assert data["learning_progress"]["current_streak"] == 2
        assert data["sessions"]["total_sessions"] == 2
        assert data["sessions"]["total_words_studied"] == 14
        assert data["sessions"]["average_accuracy"] == 78.57
        assert data["mistakes"]["total_mistakes"] == 3
        assert data["mistakes"]["most_common_type"] == "meaning"
        assert data["mistakes"]["problem_words"][0]["word_text"] == "bread"
        assert data["goal_progress"]["words_today"] == 10

    def test_ignores_other_users(
        self,
        client: TestClient,
        db_session: Session,
        other_user: models.User,
    ) -> None:
        add_session(db_session, other_user, datetime.now(UTC), 5, 0, words_studied=5)

        data = client.get("/api/v1/statistics").json()

        assert data["sessions"]["total_sessions"] == 0

    def test_requires_authentication(self, anonymous_client: TestClient) -> None:
        response = anonymous_client.get("/api/v1/statistics")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestLearningAnalytics:
    """Test suite for GET /statistics/analytics endpoint."""

    def test_period_activity(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        vocabulary: list[models.UserWord],
    ) -> None:
        now = datetime.now(UTC)
        add_session(db_session, test_user, now, 3, 1, words_studied=4, session_type="review")
        add_session(db_session, test_user, now - timedelta(days=20), 1, 0, words_studied=1)
        add_mistake(db_session, vocabulary[0], now)

        response = client.get("/api/v1/statistics/analytics", params={"days": 7})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["days"] == 7
        assert len(data["daily_progress"]) == 1
        assert data["daily_progress"][0]["words_studied"] == 4
        assert data["daily_progress"][0]["accuracy"] == 75.0
        assert data["mistakes_by_type"] == [
            {"mistake_type": "spelling", "count": 1, "percentage": 100.0}
        ]
        assert data["patterns"]["preferred_session_type"] == "review"
        assert len(data["patterns"]["weekly_distribution"]) == 7
        assert data["vocabulary_growth"][-1]["total_words"] == 5

    def test_days_out_of_range(self, client: TestClient) -> None:
        assert client.get("/api/v1/statistics/analytics", params={"days": 0}).status_code == (
            status.HTTP_422_UNPROCESSABLE_CONTENT
        )
        assert client.get("/api/v1/statistics/analytics", params={"days": 366}).status_code == (
            status.HTTP_422_UNPROCESSABLE_CONTENT
        )


class TestPerformanceMetrics:
    """Test suite for GET /statistics/performance endpoint."""

    def test_empty_dictionary(self, client: TestClient) -> None:
        response = client.get("/api/v1/statistics/performance")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["scores"]["overall_score"] == 0.0
        assert data["practice"]["trend"] == "stable"
        assert data["word_performance"]["top_words"] == []
        assert len(data["review_system"]["srs_distribution"]) == 6

    def test_scores_practiced_dictionary(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        vocabulary: list[models.UserWord],
    ) -> None:
        now = datetime.now(UTC)
        vocabulary[0].mastery_score = 90.0
        vocabulary[0].is_favorite = True
        vocabulary[1].amount_of_mistakes = 2
        vocabulary[1].skip_count = 1
        db_session.commit()
        add_session(
            db_session,
            test_user,
            now,
            3,
            1,
            response_times=[(vocabulary[0].id, 1000), (vocabulary[1].id, 3000)],
            score=75.0,
        )
        add_session(db_session, test_user, now - timedelta(days=200), 1, 1)
        add_mistake(db_session, vocabulary[1], now)

        data = client.get("/api/v1/statistics/performance").json()

        assert data["practice"]["total_sessions"] == 1
        assert data["practice"]["fastest_response_time"] == 1000
        assert data["practice"]["slowest_response_time"] == 3000
        assert data["practice"]["best_score"] == 75.0
        assert data["mistakes"]["total_mistakes"] == 1
        assert data["vocabulary"]["favorite_words"] == 1
        assert data["word_performance"]["top_words"][0]["word_text"] == "apple"
        assert data["word_performance"]["struggling_words"][0]["word_text"] == "bread"
        assert data["word_performance"]["struggling_words"][0]["average_response_time"] == 3000.0
        assert data["scores"]["response_time_score"] == 8.0
        assert 0 < data["scores"]["overall_score"] <= 10


class TestWordsNeedingAttention:
    """Test suite for GET /statistics/attention endpoint."""

    def test_lists_struggling_words(
        self,
        client: TestClient,
        db_session: Session,
        vocabulary: list[models.UserWord],
    ) -> None:
        now = datetime.now(UTC)
        for user_word in vocabulary[:2]:
            user_word.review_count = 2
            user_word.amount_of_mistakes = 2
            user_word.learning_status = "difficult"
        vocabulary[2].review_count = 10
        vocabulary[2].mastery_score = 100.0
        vocabulary[2].learning_status = "learned"
        db_session.commit()
        for mistake_type in ("spelling", "meaning", "translation", "recognition"):
            add_mistake(db_session, vocabulary[1], now, mistake_type)

        response = client.get("/api/v1/statistics/attention")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [item["word_text"] for item in data] == ["bread", "apple"]
        assert data[0]["urgency"] == "high"
        assert data[0]["difficulty_score"] == 97
        assert data[0]["primary_issue"] == "Critical difficulty - multiple learning challenges"
        assert data[1]["primary_issue"] == "Very high mistake rate"

    def test_limit(
        self,
        client: TestClient,
        db_session: Session,
        vocabulary: list[models.UserWord],
    ) -> None:
        for user_word in vocabulary:
            user_word.review_count = 2
            user_word.amount_of_mistakes = 2
            user_word.learning_status = "difficult"
        db_session.commit()

        data = client.get("/api/v1/statistics/attention", params={"limit": 3}).json()

        assert len(data) == 3

    def test_removed_entries_are_skipped(
        self,
        client: TestClient,
        db_session: Session,
        vocabulary: list[models.UserWord],
    ) -> None:
        vocabulary[0].review_count = 2
        vocabulary[0].amount_of_mistakes = 2
        vocabulary[0].learning_status = "difficult"
        db_session.commit()
        client.delete(f"/api/v1/dictionary/{vocabulary[0].id}")

        assert client.get("/api/v1/statistics/attention").json() == []

    def test_limit_out_of_range(self, client: TestClient) -> None:
        response = client.get("/api/v1/statistics/attention", params={"limit": 0})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
