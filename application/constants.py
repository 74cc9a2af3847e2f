"""Application-level constants."""

# Output filenames (inside the per-run folder)
LMT_FILENAME = "lmt.json"
SUMMARY_FILENAME = "summary.json"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"
LOG_FILENAME = "run.log"

# Summary keys
TERMS_KEY = "terms"
GROUPS_KEY = "groups"
MEMBERS_KEY = "members"
MAPPINGS_KEY = "mappings"
AUDIO_TAGGED_KEY = "audio_tagged_terms"
VISUAL_TAGGED_KEY = "visual_tagged_terms"
