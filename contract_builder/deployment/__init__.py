"""
Deployment module.

Step-sequenced deployment state machine (connect, compile, deploy, verify)
and the collaborators it drives.
"""
