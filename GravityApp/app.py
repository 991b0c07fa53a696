from kivy.config import Config
from GravityApp.config import PROGRESS_FILE, WINDOW_SIZE, WORDS_FILE
Config.set("graphics", "width", str(WINDOW_SIZE[0]))
Config.set("graphics", "height", str(WINDOW_SIZE[1]))

from kivy.app import App
from kivy.logger import Logger

from GravityApp.controller import AppController
from GravityApp.models.catalog import load_catalog
from GravityApp.persistence.progress_store import ProgressStore
from GravityApp.screens.main import GravityRoot

class GravityVocabApp(App):
    def build(self):
        self.title = "Gravity Vocab"
        catalog = load_catalog(WORDS_FILE)
        self.store = ProgressStore(PROGRESS_FILE, catalog_size=len(catalog))
        root = GravityRoot(catalog)
        self.controller = AppController(catalog, self.store, root)
        root.controller = self.controller
        self.controller.start()
        if not catalog:
            root.show_error_popup(f"No words found in\n{WORDS_FILE}")
        return root

    def on_stop(self):
        # final synchron speichern + Backup nur bei Änderungen
        store = getattr(self, "store", None)
        if store is None:
            return
        try:
            store.save()
            store.backup_if_changed()
        except OSError as e:
            Logger.error(f"Progress: saving on exit failed: {e}")

def main():
    GravityVocabApp().run()

if __name__ == "__main__":
    main()
