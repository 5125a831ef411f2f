"""initial_job_board_schema

Creates users, profiles, companies, jobs and applications.

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSONType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")

user_role = sa.Enum('CANDIDATE', 'EMPLOYER', 'ADMIN', name='user_role')
user_gender = sa.Enum('MALE', 'FEMALE', 'OTHER', name='user_gender')
job_type = sa.Enum('FULL_TIME', 'PART_TIME', 'CONTRACT', 'INTERNSHIP', 'REMOTE', name='job_type')
application_status = sa.Enum('APPLIED', 'REVIEWING', 'INTERVIEW', 'OFFER', 'REJECTED', name='application_status')


def timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Create the job board tables."""

    # 1. Users
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=True),
        sa.Column('gender', user_gender, nullable=True),
        sa.Column('role', user_role, nullable=False, server_default='CANDIDATE'),
        sa.Column('headline', sa.String(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('phone_number', sa.String(), nullable=True),
        sa.Column('skills', sa.Text(), nullable=True),
        sa.Column('profile_picture', sa.Text(), nullable=True),
        sa.Column('github_url', sa.String(), nullable=True),
        sa.Column('linkedin_url', sa.String(), nullable=True),
        *timestamps(),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    # 2. Profiles (1:1 with users)
    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('resume_url', sa.String(), nullable=True),
        sa.Column('skills', JSONType, nullable=False),
        sa.Column('company_name', sa.String(), nullable=True),
        sa.Column('company_url', sa.String(), nullable=True),
        sa.Column('work_experience', JSONType, nullable=False),
        sa.Column('job_preferences', JSONType, nullable=False),
        sa.Column('profile_stats', JSONType, nullable=False),
        *timestamps(),
    )
    op.create_index('ix_profiles_id', 'profiles', ['id'])
    op.create_index('ix_profiles_user_id', 'profiles', ['user_id'], unique=True)

    # 3. Companies
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('logo', sa.Text(), nullable=True),
        sa.Column('employer_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *timestamps(),
    )
    op.create_index('ix_companies_id', 'companies', ['id'])
    op.create_index('ix_companies_name', 'companies', ['name'])
    op.create_index('ix_companies_employer_id', 'companies', ['employer_id'])

    # 4. Jobs
    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('salary', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('type', job_type, nullable=False),
        sa.Column('employer_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('company_id', sa.Integer(), sa.ForeignKey('companies.id', ondelete='CASCADE'), nullable=True),
        *timestamps(),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_type', 'jobs', ['type'])
    op.create_index('ix_jobs_employer_id', 'jobs', ['employer_id'])
    op.create_index('ix_jobs_company_id', 'jobs', ['company_id'])
    op.create_index('ix_jobs_created_at', 'jobs', ['created_at'])

    # 5. Applications, one per (job, candidate)
    op.create_table(
        'applications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('job_id', sa.Integer(), sa.ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('candidate_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', application_status, nullable=False, server_default='APPLIED'),
        sa.Column('resume_url', sa.String(), nullable=True),
        sa.Column('cover_letter', sa.Text(), nullable=True),
        *timestamps(),
        sa.UniqueConstraint('job_id', 'candidate_id', name='uq_applications_job_candidate'),
    )
    op.create_index('ix_applications_id', 'applications', ['id'])
    op.create_index('ix_applications_job_id', 'applications', ['job_id'])
    op.create_index('ix_applications_candidate_id', 'applications', ['candidate_id'])
    op.create_index('ix_applications_status', 'applications', ['status'])
    op.create_index('ix_applications_created_at', 'applications', ['created_at'])


def downgrade() -> None:
    """Drop the job board tables and enum types."""
    op.drop_table('applications')
    op.drop_table('jobs')
    op.drop_table('companies')
    op.drop_table('profiles')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in (application_status, job_type, user_gender, user_role):
        enum_type.drop(bind, checkfirst=True)
