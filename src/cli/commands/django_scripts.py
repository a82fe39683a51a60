"""Python snippets piped into the backend's ``manage.py shell``."""

from src.cli.config.config_data import SeedAccountConfig


def seed_superuser_script(account: SeedAccountConfig) -> str:
    """Create the seed superuser unless a user with that username exists."""
    created = f"✓ Superuser created: {account.email} / {account.password}"
    return f"""\
from django.contrib.auth import get_user_model
User = get_user_model()

if not User.objects.filter(username={account.username!r}).exists():
    User.objects.create_superuser(
        username={account.username!r},
        email={account.email!r},
        password={account.password!r},
        first_name={account.first_name!r},
        last_name={account.last_name!r},
    )
    print({created!r})
else:
    print('✓ Superuser already exists')
"""


DB_SUMMARY_SCRIPT = """\
from courses.models import Course, Week, Lesson
from accounts.models import User
from assessments.models import Assignment, Submission
from grades.models import Grade
from quiz_integration.models import QuizLink
from timetable.models import Event

print("\\n📊 DATABASE STATISTICS")
print("-" * 60)
print(f"👥 Users:        {User.objects.count()}")
print(f"📚 Courses:      {Course.objects.count()}")
print(f"📅 Weeks:        {Week.objects.count()}")
print(f"📝 Lessons:      {Lesson.objects.count()}")
print(f"📋 Assignments:  {Assignment.objects.count()}")
print(f"📤 Submissions:  {Submission.objects.count()}")
print(f"🎯 Grades:       {Grade.objects.count()}")
print(f"🧪 Quiz Links:   {QuizLink.objects.count()}")
print(f"📆 Events:       {Event.objects.count()}")

print("\\n📚 COURSES")
print("-" * 60)
for course in Course.objects.all():
    weeks = course.weeks.count()
    lessons = Lesson.objects.filter(week__course=course).count()
    enrollments = course.enrollments.count()
    print(f"{course.code}: {course.title}")
    print(f"  → {weeks} weeks, {lessons} lessons, {enrollments} enrollments")
print()
"""
