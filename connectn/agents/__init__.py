"""Agent implementations for Connect-N."""

from connectn.agents.base import Agent
from connectn.agents.human import HumanAgent
from connectn.agents.mcts import MCTSNode, MonteCarloAgent
from connectn.agents.minimax import MinimaxAgent
from connectn.agents.random_agent import RandomAgent

__all__ = ["Agent", "HumanAgent", "RandomAgent", "MinimaxAgent", "MonteCarloAgent", "MCTSNode"]
