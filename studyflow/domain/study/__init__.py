"""Study tracking domain: subjects, assignments and study sessions."""
