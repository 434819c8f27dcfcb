"""Grid snake game: model, controller and rendering."""
