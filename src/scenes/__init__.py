from scenes.library import SCENES, Scene, build_scene
