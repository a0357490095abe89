"""Testing – fakes for the channel registry and clock."""
