"""create_recipe_sharing_schema

Revision ID: 3f2b9c1d7e40
Revises:
Create Date: 2026-10-18 10:12:41.508233

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2b9c1d7e40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the household-owned recipe sharing schema.

    Creates:
    - households table
    - collections, recipes, ingredients tables (household_id + parent_id copy lineage,
      unique per (household_id, parent_id))
    - collection_recipes junction (ON DELETE CASCADE)
    - recipe_ingredients junction (recipe rows removed by the recipe cleanup)
    - collection_subscriptions table
    """
    # 1. Create households table
    op.create_table(
        'households',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # 2. Create collections table
    op.create_table(
        'collections',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('subtitle', sa.String(length=255), nullable=True),
        sa.Column('filename', sa.String(length=255), nullable=True),
        sa.Column('filename_dark', sa.String(length=255), nullable=True),
        sa.Column('public', sa.Boolean(), nullable=False),
        sa.Column('url_slug', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['households.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['parent_id'], ['collections.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('household_id', 'parent_id', name='uq_collections_household_parent')
    )
    op.create_index(op.f('ix_collections_household_id'), 'collections', ['household_id'], unique=False)
    op.create_index(op.f('ix_collections_parent_id'), 'collections', ['parent_id'], unique=False)
    op.create_index(op.f('ix_collections_public'), 'collections', ['public'], unique=False)

    # 3. Create recipes table
    op.create_table(
        'recipes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('prep_time', sa.Integer(), nullable=True),
        sa.Column('cook_time', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('archived', sa.Boolean(), nullable=False),
        sa.Column('public', sa.Boolean(), nullable=False),
        sa.Column('url_slug', sa.String(length=255), nullable=False),
        sa.Column('image_filename', sa.String(length=255), nullable=True),
        sa.Column('pdf_filename', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['households.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['parent_id'], ['recipes.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('household_id', 'parent_id', name='uq_recipes_household_parent')
    )
    op.create_index(op.f('ix_recipes_household_id'), 'recipes', ['household_id'], unique=False)
    op.create_index(op.f('ix_recipes_parent_id'), 'recipes', ['parent_id'], unique=False)

    # 4. Create ingredients table
    op.create_table(
        'ingredients',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('fresh', sa.Boolean(), nullable=False),
        sa.Column('cost', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('stockcode', sa.String(length=64), nullable=True),
        sa.Column('supermarket_category', sa.String(length=100), nullable=True),
        sa.Column('pantry_category', sa.String(length=100), nullable=True),
        sa.Column('public', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['households.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['parent_id'], ['ingredients.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('household_id', 'parent_id', name='uq_ingredients_household_parent')
    )
    op.create_index(op.f('ix_ingredients_household_id'), 'ingredients', ['household_id'], unique=False)
    op.create_index(op.f('ix_ingredients_parent_id'), 'ingredients', ['parent_id'], unique=False)

    # 5. Create collection_recipes junction
    op.create_table(
        'collection_recipes',
        sa.Column('collection_id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('added_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['collection_id'], ['collections.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('collection_id', 'recipe_id')
    )
    op.create_index(
        'ix_collection_recipes_recipe_collection',
        'collection_recipes',
        ['recipe_id', 'collection_id'],
        unique=False,
    )

    # 6. Create recipe_ingredients junction
    op.create_table(
        'recipe_ingredients',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.String(length=50), nullable=True),
        sa.Column('quantity4', sa.String(length=50), nullable=True),
        sa.Column('unit', sa.String(length=50), nullable=True),
        sa.Column('preparation', sa.String(length=100), nullable=True),
        sa.Column('primary_ingredient', sa.Boolean(), nullable=False),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredients.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['parent_id'], ['recipe_ingredients.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_recipe_ingredients_recipe_id'), 'recipe_ingredients', ['recipe_id'], unique=False)
    op.create_index(op.f('ix_recipe_ingredients_ingredient_id'), 'recipe_ingredients', ['ingredient_id'], unique=False)
    op.create_index(
        'ix_recipe_ingredients_recipe_ingredient',
        'recipe_ingredients',
        ['recipe_id', 'ingredient_id'],
        unique=False,
    )

    # 7. Create collection_subscriptions table
    op.create_table(
        'collection_subscriptions',
        sa.Column('household_id', sa.Integer(), nullable=False),
        sa.Column('collection_id', sa.Integer(), nullable=False),
        sa.Column('subscribed_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['household_id'], ['households.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['collection_id'], ['collections.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('household_id', 'collection_id')
    )
    op.create_index(
        op.f('ix_collection_subscriptions_collection_id'),
        'collection_subscriptions',
        ['collection_id'],
        unique=False,
    )


def downgrade() -> None:
    """Drop the recipe sharing schema in reverse dependency order."""
    op.drop_index(op.f('ix_collection_subscriptions_collection_id'), table_name='collection_subscriptions')
    op.drop_table('collection_subscriptions')

    op.drop_index('ix_recipe_ingredients_recipe_ingredient', table_name='recipe_ingredients')
    op.drop_index(op.f('ix_recipe_ingredients_ingredient_id'), table_name='recipe_ingredients')
    op.drop_index(op.f('ix_recipe_ingredients_recipe_id'), table_name='recipe_ingredients')
    op.drop_table('recipe_ingredients')

    op.drop_index('ix_collection_recipes_recipe_collection', table_name='collection_recipes')
    op.drop_table('collection_recipes')

    op.drop_index(op.f('ix_ingredients_parent_id'), table_name='ingredients')
    op.drop_index(op.f('ix_ingredients_household_id'), table_name='ingredients')
    op.drop_table('ingredients')

    op.drop_index(op.f('ix_recipes_parent_id'), table_name='recipes')
    op.drop_index(op.f('ix_recipes_household_id'), table_name='recipes')
    op.drop_table('recipes')

    op.drop_index(op.f('ix_collections_public'), table_name='collections')
    op.drop_index(op.f('ix_collections_parent_id'), table_name='collections')
    op.drop_index(op.f('ix_collections_household_id'), table_name='collections')
    op.drop_table('collections')

    op.drop_table('households')
