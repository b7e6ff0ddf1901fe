"""Field service backend: companies, working orders, tasks and assignments."""
