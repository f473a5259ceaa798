"""
Task Frontend
Server-rendered Flask front-end for the remote task API
"""
