"""
Job application tracker

Django project package: settings, root URLConf, API error handling and a
thin HTTP client for the REST API.
"""
