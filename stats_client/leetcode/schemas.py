"""LeetCode GraphQL schemas - profile, contests, submission calendar."""

import json

from pydantic import BaseModel, Field, field_validator

# Last second of 9999-12-31, the end of the datetime range
MAX_TIMESTAMP = 253402300799


class DifficultyCount(BaseModel):
    difficulty: str
    count: int = 0
    submissions: int = 0


class SubmitStats(BaseModel):
    ac_submission_num: list[DifficultyCount] = Field(alias="acSubmissionNum", default=[])

    class Config:
        populate_by_name = True


class ProfileSchema(BaseModel):
    real_name: str | None = Field(alias="realName", default=None)
    about_me: str | None = Field(alias="aboutMe", default=None)
    user_avatar: str | None = Field(alias="userAvatar", default=None)
    location: str | None = None
    skill_tags: list[str] | None = Field(alias="skillTags", default=None)
    websites: list[str] | None = None
    country_name: str | None = Field(alias="countryName", default=None)
    company: str | None = None
    school: str | None = None
    star_rating: float | None = Field(alias="starRating", default=None)
    ranking: int | None = None

    class Config:
        populate_by_name = True


class MatchedUserSchema(BaseModel):
    username: str
    profile: ProfileSchema | None = None
    submit_stats: SubmitStats | None = Field(alias="submitStats", default=None)

    class Config:
        populate_by_name = True


class UserProfileSchema(BaseModel):
    """Response data of the profile query."""

    matched_user: MatchedUserSchema = Field(alias="matchedUser")
    all_questions_count: list[DifficultyCount] = Field(alias="allQuestionsCount", default=[])

    class Config:
        populate_by_name = True


class ContestRankingSchema(BaseModel):
    attended_contests_count: int = Field(alias="attendedContestsCount", default=0)
    rating: float = 0.0
    global_ranking: int | None = Field(alias="globalRanking", default=None)
    top_percentage: float | None = Field(alias="topPercentage", default=None)

    class Config:
        populate_by_name = True


class ContestSchema(BaseModel):
    """Response data of the contest query; history is passed through as-is."""

    ranking: ContestRankingSchema | None = Field(alias="userContestRanking", default=None)
    history: list[dict] = Field(alias="userContestRankingHistory", default=[])

    class Config:
        populate_by_name = True

    @field_validator("history", mode="before")
    @classmethod
    def _none_history(cls, v):
        return v or []


class CalendarSchema(BaseModel):
    """matchedUser.userCalendar - ``submissionCalendar`` is a JSON string
    mapping unix timestamps (UTC midnight) to submission counts."""

    streak: int = 0
    total_active_days: int = Field(alias="totalActiveDays", default=0)
    submission_calendar: dict[int, int] = Field(alias="submissionCalendar", default={})

    class Config:
        populate_by_name = True

    @field_validator("submission_calendar", mode="before")
    @classmethod
    def _parse_calendar(cls, v):
        if isinstance(v, str):
            v = json.loads(v) if v else {}
        return {ts: n for ts, n in (v or {}).items() if 0 <= int(ts) <= MAX_TIMESTAMP}
