"""create-react-tailwind-app -- scaffold a React 19 + Tailwind CSS v4 project with Vite."""

__version__ = "1.0.0"
