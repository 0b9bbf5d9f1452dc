from editor_autosave.cli import app

if __name__ == "__main__":
    app()
