from .base import BaseCommand
