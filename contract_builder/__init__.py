"""
Contract Builder - Modular Smart Contract Composition and Deployment

Assembles MultiversX smart-contract sources from reusable capability modules
and publishes them through a step-by-step deployment state machine
(connect, compile, deploy, verify).
"""

__version__ = "0.1.0"
__author__ = "Contract Builder Team"
