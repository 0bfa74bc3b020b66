"""initial schema portal pelaporan

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-01-14 09:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from datetime import datetime

from src.templates.default_evaluasi import (
    DEFAULT_EVALUASI_CLUSTERS, DEFAULT_EVALUATION_CATEGORIES, DEFAULT_INSTANSI_LEVELS
)


# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


submission_status_enum = postgresql.ENUM('pending', 'verified', 'rejected', name='submissionstatus', create_type=False)
submission_type_enum = postgresql.ENUM('evaluasi', 'laporan', name='submissiontype', create_type=False)
regency_type_enum = postgresql.ENUM('kabupaten', 'kota', name='regencytype', create_type=False)


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def _audit():
    return [
        sa.Column('created_by', sa.String(length=36), nullable=True),
        sa.Column('updated_by', sa.String(length=36), nullable=True),
    ]


def upgrade() -> None:
    connection = op.get_bind()

    # Enum types
    submission_status_enum.create(connection, checkfirst=True)
    submission_type_enum.create(connection, checkfirst=True)
    regency_type_enum.create(connection, checkfirst=True)

    # ===== REFERENSI =====
    op.create_table('instansi_levels',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('code', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_instansi_levels_code'), 'instansi_levels', ['code'], unique=True)

    op.create_table('instansi',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('slug', sa.String(length=150), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('level_id', sa.Integer(), nullable=False),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.ForeignKeyConstraint(['level_id'], ['instansi_levels.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_instansi_slug'), 'instansi', ['slug'], unique=True)
    op.create_index(op.f('ix_instansi_name'), 'instansi', ['name'], unique=False)
    op.create_index(op.f('ix_instansi_level_id'), 'instansi', ['level_id'], unique=False)

    op.create_table('provinces',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_provinces_code'), 'provinces', ['code'], unique=True)

    op.create_table('regencies',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('province_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', regency_type_enum, nullable=False),
        sa.ForeignKeyConstraint(['province_id'], ['provinces.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_regencies_code'), 'regencies', ['code'], unique=True)
    op.create_index(op.f('ix_regencies_province_id'), 'regencies', ['province_id'], unique=False)

    op.create_table('districts',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('regency_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['regency_id'], ['regencies.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_districts_code'), 'districts', ['code'], unique=True)
    op.create_index(op.f('ix_districts_regency_id'), 'districts', ['regency_id'], unique=False)

    op.create_table('villages',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('district_id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['district_id'], ['districts.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_villages_code'), 'villages', ['code'], unique=True)
    op.create_index(op.f('ix_villages_district_id'), 'villages', ['district_id'], unique=False)

    # ===== BANK PERTANYAAN EVALUASI =====
    op.create_table('evaluasi_clusters',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        *_audit(),
        sa.Column('instansi_level_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('sequence', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('applies_to_all', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.CheckConstraint('NOT applies_to_all OR instansi_level_id IS NULL', name='ck_evaluasi_clusters_global_scope'),
        sa.ForeignKeyConstraint(['instansi_level_id'], ['instansi_levels.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_evaluasi_clusters_instansi_level_id'), 'evaluasi_clusters', ['instansi_level_id'], unique=False)
    op.create_index(op.f('ix_evaluasi_clusters_is_active'), 'evaluasi_clusters', ['is_active'], unique=False)
    op.create_index(
        'uq_evaluasi_clusters_level_sequence_active', 'evaluasi_clusters',
        ['instansi_level_id', 'sequence'], unique=True, postgresql_where=sa.text('is_active')
    )

    op.create_table('evaluasi_questions',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        *_audit(),
        sa.Column('cluster_id', sa.Integer(), nullable=False),
        sa.Column('question_text', sa.String(), nullable=False),
        sa.Column('sequence', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.ForeignKeyConstraint(['cluster_id'], ['evaluasi_clusters.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_evaluasi_questions_cluster_id'), 'evaluasi_questions', ['cluster_id'], unique=False)
    op.create_index(op.f('ix_evaluasi_questions_is_active'), 'evaluasi_questions', ['is_active'], unique=False)
    op.create_index(
        'uq_evaluasi_questions_cluster_sequence_active', 'evaluasi_questions',
        ['cluster_id', 'sequence'], unique=True, postgresql_where=sa.text('is_active')
    )

    op.create_table('evaluation_categories',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.Column('slug', sa.String(length=50), nullable=False),
        sa.Column('label', sa.String(length=60), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('min_score', sa.Integer(), nullable=False),
        sa.Column('max_score', sa.Integer(), nullable=False),
        sa.Column('color_class', sa.String(length=60), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug')
    )

    # ===== TEMPLATE LAPORAN =====
    op.create_table('laporan_templates',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        *_audit(),
        sa.Column('instansi_id', sa.Integer(), nullable=True),
        sa.Column('instansi_level_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.ForeignKeyConstraint(['instansi_id'], ['instansi.id']),
        sa.ForeignKeyConstraint(['instansi_level_id'], ['instansi_levels.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_laporan_templates_instansi_id'), 'laporan_templates', ['instansi_id'], unique=False)
    op.create_index(op.f('ix_laporan_templates_instansi_level_id'), 'laporan_templates', ['instansi_level_id'], unique=False)
    op.create_index(op.f('ix_laporan_templates_year'), 'laporan_templates', ['year'], unique=False)
    op.create_index(op.f('ix_laporan_templates_is_active'), 'laporan_templates', ['is_active'], unique=False)

    op.create_table('laporan_sections',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('template_id', sa.String(length=36), nullable=False),
        sa.Column('code', sa.String(length=50), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('indicator', sa.String(), nullable=False, server_default=''),
        sa.Column('has_target', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('has_budget', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('sequence', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['template_id'], ['laporan_templates.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_laporan_sections_template_id'), 'laporan_sections', ['template_id'], unique=False)
    op.create_index(op.f('ix_laporan_sections_sequence'), 'laporan_sections', ['sequence'], unique=False)

    # ===== SUBMISSION EVALUASI =====
    op.create_table('evaluation_submissions',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('submission_code', sa.String(length=30), nullable=False),
        sa.Column('instansi_id', sa.Integer(), nullable=True),
        sa.Column('instansi_name', sa.String(length=255), nullable=False),
        sa.Column('instansi_level_id', sa.Integer(), nullable=True),
        sa.Column('instansi_level_text', sa.String(length=150), nullable=True),
        sa.Column('instansi_address', sa.String(length=255), nullable=True),
        sa.Column('origin_regency_id', sa.Integer(), nullable=True),
        sa.Column('origin_district_id', sa.Integer(), nullable=True),
        sa.Column('origin_village_id', sa.Integer(), nullable=True),
        sa.Column('pejabat_nama', sa.String(length=255), nullable=True),
        sa.Column('pejabat_jabatan', sa.String(length=150), nullable=True),
        sa.Column('employee_male_count', sa.Integer(), nullable=True),
        sa.Column('employee_female_count', sa.Integer(), nullable=True),
        sa.Column('evaluation_date', sa.Date(), nullable=True),
        sa.Column('submission_date', sa.DateTime(), nullable=False),
        sa.Column('report_year', sa.Integer(), nullable=False),
        sa.Column('is_late', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('category_label', sa.String(length=60), nullable=True),
        sa.Column('status', submission_status_enum, nullable=False, server_default='pending'),
        sa.Column('remarks', sa.String(), nullable=True),
        sa.Column('submitted_by', sa.String(length=36), nullable=True),
        sa.Column('verified_by', sa.String(length=36), nullable=True),
        sa.Column('verified_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['instansi_id'], ['instansi.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['instansi_level_id'], ['instansi_levels.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['origin_regency_id'], ['regencies.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['origin_district_id'], ['districts.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['origin_village_id'], ['villages.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['category_id'], ['evaluation_categories.id'], ondelete='SET NULL'),
        sa.CheckConstraint('employee_male_count IS NULL OR employee_male_count >= 0', name='ck_evaluation_submissions_male'),
        sa.CheckConstraint('employee_female_count IS NULL OR employee_female_count >= 0', name='ck_evaluation_submissions_female'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_evaluation_submissions_submission_code'), 'evaluation_submissions', ['submission_code'], unique=True)
    op.create_index(op.f('ix_evaluation_submissions_instansi_id'), 'evaluation_submissions', ['instansi_id'], unique=False)
    op.create_index(op.f('ix_evaluation_submissions_instansi_name'), 'evaluation_submissions', ['instansi_name'], unique=False)
    op.create_index(op.f('ix_evaluation_submissions_instansi_level_id'), 'evaluation_submissions', ['instansi_level_id'], unique=False)
    op.create_index(op.f('ix_evaluation_submissions_submission_date'), 'evaluation_submissions', ['submission_date'], unique=False)
    op.create_index(op.f('ix_evaluation_submissions_report_year'), 'evaluation_submissions', ['report_year'], unique=False)
    op.create_index(op.f('ix_evaluation_submissions_status'), 'evaluation_submissions', ['status'], unique=False)
    op.create_index(op.f('ix_evaluation_submissions_submitted_by'), 'evaluation_submissions', ['submitted_by'], unique=False)

    op.create_table('evaluation_answers',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('submission_id', sa.String(length=36), nullable=False),
        sa.Column('question_id', sa.Integer(), nullable=False),
        sa.Column('question_text', sa.String(), nullable=False),
        sa.Column('answer_value', sa.Integer(), nullable=False),
        sa.Column('remark', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['submission_id'], ['evaluation_submissions.id'], ondelete='CASCADE'),
        sa.CheckConstraint('answer_value IN (0, 1)', name='ck_evaluation_answers_value'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_evaluation_answers_submission_id'), 'evaluation_answers', ['submission_id'], unique=False)
    op.create_index(op.f('ix_evaluation_answers_question_id'), 'evaluation_answers', ['question_id'], unique=False)

    # ===== SUBMISSION LAPORAN =====
    op.create_table('laporan_submissions',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('submission_code', sa.String(length=30), nullable=False),
        sa.Column('template_id', sa.String(length=36), nullable=True),
        sa.Column('instansi_id', sa.Integer(), nullable=True),
        sa.Column('instansi_name', sa.String(length=255), nullable=False),
        sa.Column('instansi_level_id', sa.Integer(), nullable=True),
        sa.Column('instansi_level_text', sa.String(length=150), nullable=True),
        sa.Column('origin_regency_id', sa.Integer(), nullable=True),
        sa.Column('origin_regency_name', sa.String(length=255), nullable=True),
        sa.Column('report_year', sa.Integer(), nullable=False),
        sa.Column('report_level', sa.String(length=120), nullable=True),
        sa.Column('is_late', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', submission_status_enum, nullable=False, server_default='pending'),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('submitted_by', sa.String(length=36), nullable=True),
        sa.Column('submitted_at', sa.DateTime(), nullable=False),
        sa.Column('verified_by', sa.String(length=36), nullable=True),
        sa.Column('verified_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['template_id'], ['laporan_templates.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['instansi_id'], ['instansi.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['instansi_level_id'], ['instansi_levels.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['origin_regency_id'], ['regencies.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_laporan_submissions_submission_code'), 'laporan_submissions', ['submission_code'], unique=True)
    op.create_index(op.f('ix_laporan_submissions_instansi_id'), 'laporan_submissions', ['instansi_id'], unique=False)
    op.create_index(op.f('ix_laporan_submissions_instansi_name'), 'laporan_submissions', ['instansi_name'], unique=False)
    op.create_index(op.f('ix_laporan_submissions_instansi_level_id'), 'laporan_submissions', ['instansi_level_id'], unique=False)
    op.create_index(op.f('ix_laporan_submissions_report_year'), 'laporan_submissions', ['report_year'], unique=False)
    op.create_index(op.f('ix_laporan_submissions_status'), 'laporan_submissions', ['status'], unique=False)
    op.create_index(op.f('ix_laporan_submissions_submitted_by'), 'laporan_submissions', ['submitted_by'], unique=False)
    op.create_index(op.f('ix_laporan_submissions_submitted_at'), 'laporan_submissions', ['submitted_at'], unique=False)

    op.create_table('laporan_submission_sections',
        sa.Column('id', sa.String(length=36), nullable=False),
        *_timestamps(),
        sa.Column('laporan_submission_id', sa.String(length=36), nullable=False),
        sa.Column('section_id', sa.String(length=36), nullable=True),
        sa.Column('section_code', sa.String(length=50), nullable=True),
        sa.Column('section_title', sa.String(length=255), nullable=False),
        sa.Column('sequence', sa.Integer(), nullable=False),
        sa.Column('has_target', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('has_budget', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('target_year', sa.String(length=120), nullable=True),
        sa.Column('target_semester_1', sa.String(length=120), nullable=True),
        sa.Column('target_semester_2', sa.String(length=120), nullable=True),
        sa.Column('budget_year', sa.String(length=120), nullable=True),
        sa.Column('budget_semester_1', sa.String(length=120), nullable=True),
        sa.Column('budget_semester_2', sa.String(length=120), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['laporan_submission_id'], ['laporan_submissions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['section_id'], ['laporan_sections.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(
        op.f('ix_laporan_submission_sections_laporan_submission_id'),
        'laporan_submission_sections', ['laporan_submission_id'], unique=False
    )

    # ===== AUDIT & SETTINGS =====
    op.create_table('submission_status_logs',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('submission_type', submission_type_enum, nullable=False),
        sa.Column('submission_id', sa.String(length=36), nullable=False),
        sa.Column('previous_status', submission_status_enum, nullable=True),
        sa.Column('new_status', submission_status_enum, nullable=False),
        sa.Column('remarks', sa.String(), nullable=True),
        sa.Column('instansi_id', sa.Integer(), nullable=True),
        sa.Column('changed_by', sa.String(length=36), nullable=True),
        sa.Column('changed_by_name', sa.String(length=200), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['instansi_id'], ['instansi.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_submission_status_logs_submission_id'), 'submission_status_logs', ['submission_id'], unique=False)
    op.create_index(op.f('ix_submission_status_logs_created_at'), 'submission_status_logs', ['created_at'], unique=False)

    op.create_table('reporting_settings',
        sa.Column('id', sa.Integer(), nullable=False),
        *_timestamps(),
        *_audit(),
        sa.Column('reporting_year', sa.Integer(), nullable=False),
        sa.Column('reporting_deadline', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_reporting_settings_reporting_year'), 'reporting_settings', ['reporting_year'], unique=False)

    _seed_reference_data(connection)


def _seed_reference_data(connection) -> None:
    """Seed tingkat instansi, band kategori, dan bank pertanyaan bawaan."""
    now = datetime.utcnow()

    for level in DEFAULT_INSTANSI_LEVELS:
        connection.execute(
            sa.text("""
                INSERT INTO instansi_levels (id, code, name, created_at)
                VALUES (:id, :code, :name, :created_at)
            """),
            {**level, 'created_at': now}
        )

    for category in DEFAULT_EVALUATION_CATEGORIES:
        connection.execute(
            sa.text("""
                INSERT INTO evaluation_categories (
                    slug, label, description, min_score, max_score, color_class, created_at
                ) VALUES (
                    :slug, :label, :description, :min_score, :max_score, :color_class, :created_at
                )
            """),
            {**category, 'created_at': now}
        )

    # Bank bawaan sebagai klaster global; id pertanyaan 1..16 dipertahankan
    for cluster in DEFAULT_EVALUASI_CLUSTERS:
        connection.execute(
            sa.text("""
                INSERT INTO evaluasi_clusters (
                    id, instansi_level_id, title, sequence, is_active, applies_to_all, created_at
                ) VALUES (
                    :id, NULL, :title, :sequence, true, true, :created_at
                )
            """),
            {'id': cluster['id'], 'title': cluster['title'], 'sequence': cluster['id'], 'created_at': now}
        )
        for position, question in enumerate(cluster['questions'], start=1):
            connection.execute(
                sa.text("""
                    INSERT INTO evaluasi_questions (
                        id, cluster_id, question_text, sequence, is_active, created_at
                    ) VALUES (
                        :id, :cluster_id, :question_text, :sequence, true, :created_at
                    )
                """),
                {
                    'id': question['id'],
                    'cluster_id': cluster['id'],
                    'question_text': question['text'],
                    'sequence': position,
                    'created_at': now
                }
            )

    # Sinkronkan sequence serial setelah insert dengan id eksplisit
    for table in ('instansi_levels', 'evaluasi_clusters', 'evaluasi_questions'):
        connection.execute(sa.text(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), (SELECT MAX(id) FROM {table}))"
        ))


def downgrade() -> None:
    op.drop_table('reporting_settings')
    op.drop_table('submission_status_logs')
    op.drop_table('laporan_submission_sections')
    op.drop_table('laporan_submissions')
    op.drop_table('evaluation_answers')
    op.drop_table('evaluation_submissions')
    op.drop_table('laporan_sections')
    op.drop_table('laporan_templates')
    op.drop_table('evaluation_categories')
    op.drop_table('evaluasi_questions')
    op.drop_table('evaluasi_clusters')
    op.drop_table('villages')
    op.drop_table('districts')
    op.drop_table('regencies')
    op.drop_table('provinces')
    op.drop_table('instansi')
    op.drop_table('instansi_levels')

    connection = op.get_bind()
    regency_type_enum.drop(connection, checkfirst=True)
    submission_type_enum.drop(connection, checkfirst=True)
    submission_status_enum.drop(connection, checkfirst=True)
