"""
tasks: personal to-do items.

Provides:
  • ``TaskService`` with owner-scoped create / list / get / update / delete
  • Task API routes under ``/tasks``
"""
