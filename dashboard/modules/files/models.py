# Supabase table: photos  (Drive Lite files)
# Storage bucket: drive-lite (public)
# This file documents the expected database schema
# Actual operations are handled via OwnedCollection in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null) - original file name, renamable
- url: text (not null) - public URL of the object at {user_id}/{timestamp_ms}_{name}
- size: bigint (nullable) - bytes
- user_id: uuid (foreign key to auth.users.id, on delete cascade, not null)
- created_at: timestamp (default: now())

Row level security (recommended; the service also filters by user_id):
- policy "owner" on photos for all using (auth.uid() = user_id)
- storage policy on drive-lite: (storage.foldername(name))[1] = auth.uid()::text
"""
