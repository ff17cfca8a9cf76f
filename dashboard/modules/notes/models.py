# Supabase table: markdown_notes
# This file documents the expected database schema

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (foreign key to auth.users.id, on delete cascade, not null)
- title: text (not null)
- content: text (not null) - raw Markdown, stored and returned as-is
- created_at: timestamp (default: now())

Row level security (recommended; the service also filters by user_id):
- policy "owner" for all using (auth.uid() = user_id)
"""
