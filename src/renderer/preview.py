# renderer/preview.py
import numpy as np

def show_image(pixels: np.ndarray, title: str = "Ray Tracer", max_size=(1280, 720)):
    """
    Display a finished render in a pygame window until it is closed or
    Escape is pressed. Large images are scaled down to fit `max_size`.
    """
    import pygame

    height, width = pixels.shape[:2]
    scale = min(1.0, max_size[0] / width, max_size[1] / height)
    window_size = (max(1, int(width * scale)), max(1, int(height * scale)))

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(pixels.swapaxes(0, 1))
        if window_size != (width, height):
            surface = pygame.transform.scale(surface, window_size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
