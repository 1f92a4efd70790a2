"""Prompt database operations.

CRUD queries for saved prompts stored in the prompts table.
"""

import logging
import time
import uuid
from sqlite3 import Connection, Row

from core import Prompt

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _generate_prompt_id() -> str:
    return uuid.uuid4().hex


def _row_to_prompt(row: Row) -> Prompt:
    return Prompt(
        id=row["id"],
        name=row["name"],
        content=row["content"],
        category=row["category"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def list_prompts(conn: Connection, category: str | None = None) -> list[Prompt]:
    """List saved prompts in creation order.

    Args:
        conn: Database connection
        category: Optional category filter

    Returns:
        List of prompts
    """
    query = "SELECT * FROM prompts WHERE 1=1"
    params: list = []

    if category:
        query += " AND category = ?"
        params.append(category)

    query += " ORDER BY created_at, rowid"

    rows = conn.execute(query, params).fetchall()
    return [_row_to_prompt(r) for r in rows]


def get_prompt(conn: Connection, prompt_id: str) -> Prompt | None:
    """Get a single prompt by ID.

    Returns:
        The prompt, or None if not found
    """
    row = conn.execute("SELECT * FROM prompts WHERE id = ?", (prompt_id,)).fetchone()
    return _row_to_prompt(row) if row else None


def create_prompt(
    conn: Connection,
    name: str,
    content: str,
    category: str | None = None,
) -> Prompt:
    """Create a prompt.

    Args:
        conn: Database connection
        name: Display name
        content: Template text
        category: Optional category

    Returns:
        The created prompt
    """
    now = _now_ms()
    prompt = Prompt(
        id=_generate_prompt_id(),
        name=name,
        content=content,
        category=category,
        created_at=now,
        updated_at=now,
    )
    conn.execute(
        """INSERT INTO prompts (id, name, content, category, created_at, updated_at)
           VALUES (?, ?, ?, ?, ?, ?)""",
        (
            prompt.id,
            prompt.name,
            prompt.content,
            prompt.category,
            prompt.created_at,
            prompt.updated_at,
        ),
    )
    conn.commit()

    logger.info("[PROMPTS] Created prompt id=%s name=%s", prompt.id, prompt.name)
    return prompt


def update_prompt(
    conn: Connection,
    prompt_id: str,
    *,
    name: str | None = None,
    content: str | None = None,
    category: str | None = None,
    clear_category: bool = False,
) -> Prompt | None:
    """Update a prompt.

    id and created_at never change; updated_at is always refreshed.

    Args:
        conn: Database connection
        prompt_id: Prompt ID
        name: New name
        content: New template text
        category: New category
        clear_category: Set category to NULL

    Returns:
        Updated prompt, or None if not found
    """
    existing = conn.execute("SELECT id FROM prompts WHERE id = ?", (prompt_id,)).fetchone()
    if not existing:
        return None

    updates = ["updated_at = ?"]
    values: list = [_now_ms()]

    if name is not None:
        updates.append("name = ?")
        values.append(name)

    if content is not None:
        updates.append("content = ?")
        values.append(content)

    if category is not None:
        updates.append("category = ?")
        values.append(category)
    elif clear_category:
        updates.append("category = NULL")

    values.append(prompt_id)
    conn.execute(f"UPDATE prompts SET {', '.join(updates)} WHERE id = ?", values)
    conn.commit()
    logger.info("[PROMPTS] Updated prompt id=%s", prompt_id)

    return get_prompt(conn, prompt_id)


def delete_prompt(conn: Connection, prompt_id: str) -> bool:
    """Delete a prompt.

    Returns:
        True if deleted, False if not found
    """
    cursor = conn.execute("DELETE FROM prompts WHERE id = ?", (prompt_id,))
    conn.commit()
    if cursor.rowcount == 0:
        return False

    logger.info("[PROMPTS] Deleted prompt id=%s", prompt_id)
    return True
