# Supabase table: pokemon_reviews
# Species data comes from PokeAPI (read-only) and is never stored
# This file documents the expected database schema

"""
Expected Supabase table structure:
- id: uuid (primary key)
- pokemon_name: text (not null) - lower-case PokeAPI name, not its numeric id
- user_id: uuid (foreign key to auth.users.id, on delete cascade, not null)
- content: text (not null)
- rating: smallint (nullable, 1-5)
- created_at: timestamp (default: now())

Reviews are readable by every signed-in user; only the author may change them.

Row level security (recommended; the service also filters writes by user_id):
- policy "read" for select using (auth.role() = 'authenticated')
- policy "author" for insert, update, delete using (auth.uid() = user_id)
"""
