"""Command-line front end for the blackboard renderer."""
