from __future__ import annotations

import asyncio
import logging
import math
import random
from typing import Sequence

from app.core.config import settings
from app.core.config.scoring import get_scoring_value
from app.features.job_matcher import compute_match_score, split_skills
from app.schemas.jobs import JobListing

logger = logging.getLogger(__name__)

JOB_TITLES = (
    "Frontend Developer", "Backend Engineer", "Full Stack Developer",
    "UI/UX Designer", "Product Manager", "DevOps Engineer",
    "Data Scientist", "Mobile Developer", "QA Engineer",
    "System Architect", "Technical Lead", "Scrum Master",
)

COMPANIES = (
    "TechCorp", "Innovate Inc", "DataWorks",
    "CloudSolutions", "DigitalFuture", "NextGen Technologies",
    "AppWorks", "CodeMasters", "Pixel Perfect",
    "ByteBuilders", "LogicLabs", "WebVision",
)

LOCATIONS = (
    "San Francisco, CA", "New York, NY", "Austin, TX",
    "Seattle, WA", "Boston, MA", "Chicago, IL",
    "Los Angeles, CA", "Denver, CO", "Atlanta, GA",
    "Portland, OR", "Miami, FL", "Remote",
)

DESCRIPTIONS = (
    "Join our dynamic team developing cutting-edge applications that transform how users interact with technology.",
    "We're looking for a talented professional to help us build scalable and robust backend systems.",
    "Help us create intuitive user interfaces that deliver exceptional user experiences.",
    "Work with our cross-functional team to develop innovative solutions for complex business problems.",
    "Join our agile team developing products that make a real difference in people's lives.",
)

SALARY_RANGES = (
    "$80,000 - $100,000", "$90,000 - $120,000", "$100,000 - $130,000",
    "$110,000 - $140,000", "$120,000 - $150,000", "$130,000 - $160,000",
    "$140,000 - $170,000", "$150,000 - $180,000",
)

POSTED_DATES = (
    "Today", "Yesterday", "2 days ago", "3 days ago",
    "4 days ago", "5 days ago", "1 week ago", "2 weeks ago",
)

COMMON_REQUIREMENTS = (
    "Bachelor's degree in Computer Science or related field",
    "Strong problem-solving skills",
    "Excellent communication and teamwork abilities",
    "Agile development experience",
    "Experience with CI/CD pipelines",
)

OTHER_SKILLS = (
    "Docker", "Kubernetes", "AWS", "Azure", "CI/CD", "Git",
    "Agile", "Scrum", "REST API", "GraphQL", "MongoDB", "SQL",
    "Testing", "DevOps", "Machine Learning", "Data Analysis",
)


def default_rng() -> random.Random:
    return random.Random(settings.jobs_random_seed)


def _pick_required_skills(user_skill_names: Sequence[str], rng: random.Random) -> list[str]:
    total = len(user_skill_names)
    shuffled = rng.sample(list(user_skill_names), total)
    include = math.floor(rng.random() * (total * 0.4)) + math.floor(total * 0.5)
    job_skills = shuffled[: min(include, total)]

    held = {name.lower() for name in user_skill_names}
    others = [skill for skill in OTHER_SKILLS if skill.lower() not in held]
    rng.shuffle(others)
    max_other = int(get_scoring_value("jobs.max_other_skills", 4))
    job_skills.extend(others[: rng.randrange(max_other) + 1])
    return job_skills


def generate_job_listings(
    user_skill_names: Sequence[str],
    *,
    rng: random.Random | None = None,
) -> list[JobListing]:
    """Build synthetic listings mixing the user's skills with unrelated ones.

    All randomness is drawn from *rng*, so a seeded ``random.Random`` yields
    the same listings every time.
    """
    rng = rng or default_rng()
    names = list(dict.fromkeys(name.strip() for name in user_skill_names if name and name.strip()))
    min_listings = int(get_scoring_value("jobs.min_listings", 10))
    max_listings = int(get_scoring_value("jobs.max_listings", 15))
    per_listing = int(get_scoring_value("jobs.requirements_per_listing", 3))

    listings: list[JobListing] = []
    for index in range(rng.randint(min_listings, max_listings)):
        title = rng.choice(JOB_TITLES)
        company = rng.choice(COMPANIES)
        location = rng.choice(LOCATIONS)
        description = rng.choice(DESCRIPTIONS)
        salary = rng.choice(SALARY_RANGES)
        posted_date = rng.choice(POSTED_DATES)
        requirements = rng.sample(COMMON_REQUIREMENTS, min(per_listing, len(COMMON_REQUIREMENTS)))
        skills = _pick_required_skills(names, rng)
        matching, missing = split_skills(skills, names)
        listings.append(
            JobListing(
                id=f"job-{index}",
                title=title,
                company=company,
                location=location,
                description=description,
                requirements=requirements,
                skills=skills,
                matching_skills=matching,
                missing_skills=missing,
                salary=salary,
                match_score=compute_match_score(skills, names),
                posted_date=posted_date,
            )
        )
    return listings


async def fetch_job_listings(
    user_skill_names: Sequence[str],
    *,
    rng: random.Random | None = None,
    delay_seconds: float | None = None,
) -> list[JobListing]:
    delay = settings.job_search_delay_ms / 1000 if delay_seconds is None else max(0.0, delay_seconds)
    if delay:
        await asyncio.sleep(delay)
    listings = generate_job_listings(user_skill_names, rng=rng)
    logger.info("job_listings_generated count=%d user_skills=%d", len(listings), len(user_skill_names))
    return listings
