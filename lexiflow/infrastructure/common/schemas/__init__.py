"""Response envelopes and public settings shared by every router."""
