# Supabase table: todos
# This file documents the expected database schema
# Actual operations are handled via OwnedCollection in service.py

"""
Expected Supabase table structure:
- id: bigint (primary key, identity) - list order
- task: text (not null)
- is_complete: boolean (not null, default: false)
- user_id: uuid (foreign key to auth.users.id, on delete cascade, not null)
- created_at: timestamp (default: now())

Row level security (recommended; the service also filters by user_id):
- enable row level security on todos
- policy "owner" for all using (auth.uid() = user_id) with check (auth.uid() = user_id)
"""
