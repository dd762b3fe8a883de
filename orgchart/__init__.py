"""orgchart: organizational directory service (people, hierarchy, search)."""
