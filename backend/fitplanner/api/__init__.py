"""HTTP routers for the fitness planner backend."""
