"""Initial schema: decks, cards and user activity tables

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'deck',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('deck_name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('is_shared', sa.Boolean(), nullable=False),
        sa.Column('shared_with', sa.JSON(), nullable=True),
        sa.Column('is_ai_generated', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_deck_user_id'), 'deck', ['user_id'], unique=False)

    # Every card carries its full review state; there is no nullable legacy shape
    op.create_table(
        'card',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.String(), nullable=False),
        sa.Column('word', sa.String(), nullable=False),
        sa.Column('sentence', sa.String(), nullable=False),
        sa.Column('language', sa.String(), nullable=False),
        sa.Column('level', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('last_reviewed_at', sa.DateTime(), nullable=False),
        sa.Column('next_review_at', sa.DateTime(), nullable=False),
        sa.Column('answer_word', sa.String(), nullable=True),
        sa.Column('sentence_translation', sa.String(), nullable=True),
        sa.Column('scenario', sa.String(), nullable=True),
        sa.ForeignKeyConstraint(['deck_id'], ['deck.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_card_deck_id'), 'card', ['deck_id'], unique=False)
    op.create_index(op.f('ix_card_next_review_at'), 'card', ['next_review_at'], unique=False)

    op.create_table(
        'shared_deck',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.String(), nullable=False),
        sa.Column('shared_by_user_id', sa.String(), nullable=False),
        sa.Column('shared_to_user_ids', sa.JSON(), nullable=True),
        sa.Column('access_level', sa.String(), nullable=True),
        sa.Column('shared_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['deck_id'], ['deck.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_shared_deck_deck_id'), 'shared_deck', ['deck_id'], unique=False)

    op.create_table(
        'deck_progress',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('deck_id', sa.String(), nullable=False),
        sa.Column('card_id', sa.Integer(), nullable=False),
        sa.Column('correct', sa.Boolean(), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['deck_id'], ['deck.id'], ),
        sa.ForeignKeyConstraint(['card_id'], ['card.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_deck_progress_user_id'), 'deck_progress', ['user_id'], unique=False)
    op.create_index(op.f('ix_deck_progress_deck_id'), 'deck_progress', ['deck_id'], unique=False)

    op.create_table(
        'study_session',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('deck_id', sa.String(), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('cards_reviewed', sa.JSON(), nullable=True),
        sa.Column('total_correct', sa.Integer(), nullable=False),
        sa.Column('total_incorrect', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_study_session_user_id'), 'study_session', ['user_id'], unique=False)
    op.create_index(op.f('ix_study_session_deck_id'), 'study_session', ['deck_id'], unique=False)

    op.create_table(
        'user_preferences',
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('motivation', sa.String(), nullable=True),
        sa.Column('proficiency_level', sa.String(), nullable=True),
        sa.Column('learning_style', sa.String(), nullable=True),
        sa.Column('study_pattern', sa.String(), nullable=True),
        sa.Column('notifications', sa.Boolean(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id')
    )

    op.create_table(
        'user_settings',
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('selected_language', sa.String(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id')
    )

    op.create_table(
        'ai_request',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('input_word', sa.String(), nullable=False),
        sa.Column('generated_deck_id', sa.String(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_ai_request_user_id'), 'ai_request', ['user_id'], unique=False)

    op.create_table(
        'notification',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('message', sa.String(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('scheduled_for', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_notification_user_id'), 'notification', ['user_id'], unique=False)

    op.create_table(
        'analytics',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('data', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_analytics_user_id'), 'analytics', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_table('analytics')
    op.drop_table('notification')
    op.drop_table('ai_request')
    op.drop_table('user_settings')
    op.drop_table('user_preferences')
    op.drop_table('study_session')
    op.drop_table('deck_progress')
    op.drop_table('shared_deck')
    op.drop_table('card')
    op.drop_table('deck')
