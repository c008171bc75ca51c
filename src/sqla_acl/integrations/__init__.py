"""Framework integrations for sqla-acl."""
