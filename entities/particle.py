"""
Particle Effects System
Radial bursts for fruit pickups and the win celebration
"""

import math
import random
from utils.constants import (
    PARTICLE_BURST_COUNT, PARTICLE_DECAY, PARTICLE_SPEED_MIN, PARTICLE_SPEED_SPAN
)
from utils.colors import COLOR_PARTICLE_PICKUP, COLOR_PARTICLE_WIN
from utils.helpers import cell_center


class Particle:
    """
    Single particle
    """
    def __init__(self, x, y, vx, vy, color, life=1.0):
        """
        Args:
            x, y: Starting position (pixels)
            vx, vy: Velocity (pixels per tick)
            color: RGB color tag
            life: Remaining life, starts at 1 and fades to 0
        """
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.color = color
        self.life = life

    @property
    def alive(self):
        return self.life > 0

    def update(self, decay=PARTICLE_DECAY):
        """Advance by velocity and fade"""
        self.x += self.vx
        self.y += self.vy
        self.life -= decay

    def state(self):
        return (self.x, self.y, self.life, self.color)


class ParticleSystem:
    """
    Manages all particles
    """
    def __init__(self, rng=None):
        self.particles = []
        self.rng = rng if rng is not None else random.Random()

    def add_particle(self, particle):
        """Add a particle"""
        self.particles.append(particle)

    def spawn_burst(self, cell, color, count=PARTICLE_BURST_COUNT):
        """
        Emit a symmetric radial burst from the center of a cell

        Args:
            cell: (x, y) grid position
            color: Particle color
            count: Number of particles, evenly spaced by angle
        """
        cx, cy = cell_center(*cell)

        for i in range(count):
            angle = (math.pi * 2 * i) / count
            speed = PARTICLE_SPEED_MIN + self.rng.random() * PARTICLE_SPEED_SPAN

            self.add_particle(Particle(
                cx, cy,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
                color
            ))

    def tick(self, decay=PARTICLE_DECAY):
        """Update all particles and drop the dead ones"""
        for particle in self.particles:
            particle.update(decay)
        self.particles = [p for p in self.particles if p.alive]

    def states(self):
        return tuple(p.state() for p in self.particles)

    def clear(self):
        """Remove all particles"""
        self.particles.clear()

    def __len__(self):
        return len(self.particles)


class ParticleEffects:
    """
    Helper class to create the game's particle effects
    """
    def __init__(self, particle_system):
        """
        Args:
            particle_system: ParticleSystem instance
        """
        self.system = particle_system

    def collection_burst(self, cell):
        """Burst when a fruit is picked up"""
        self.system.spawn_burst(cell, COLOR_PARTICLE_PICKUP)

    def celebration_burst(self, cell):
        """Burst for the win celebration"""
        self.system.spawn_burst(cell, COLOR_PARTICLE_WIN)
