import atexit

from django.apps import AppConfig


class CommonConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.common"
    document_store = None

    def ready(self):
        from .storage import DocumentStore, uses_document_store

        if not uses_document_store():
            return
        store = DocumentStore.from_settings().open()
        store.ensure_indexes()
        atexit.register(store.close)
        self.document_store = store
