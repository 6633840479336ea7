import matplotlib.pyplot as plt
import numpy as np
from typing import Dict
from quadrature.composite import ConvergenceStudy


class ConvergencePlotter:
    """
    Clase sencilla para visualizar la convergencia de reglas compuestas.

    Parameters
    ----------
    studies : Dict[str, ConvergenceStudy]
        Estudios de convergencia por nombre de regla, p.ej. {'midpoint': ...}.
    """

    def __init__(self, studies: Dict[str, ConvergenceStudy]):
        if len(studies) == 0:
            raise ValueError("Se necesita al menos un estudio de convergencia.")
        self.studies = dict(studies)

    def __plot_estimates__(self, figsize=(10, 6)):
        """Plotea la estimación de la integral frente a n."""
        fig, ax = plt.subplots(figsize=figsize)

        for name, study in self.studies.items():
            ax.plot(study.ns, study.estimates, marker='o', label=name, linewidth=2)
        exact = next((s.exact for s in self.studies.values() if s.exact is not None), None)
        if exact is not None:
            ax.axhline(exact, color='black', linestyle='--', linewidth=1, label='exacto')

        ax.set_xscale('log')
        ax.set_xlabel('Subintervalos n', fontsize=12)
        ax.set_ylabel('Estimación', fontsize=12)
        ax.set_title('Estimación de la integral', fontsize=14, fontweight='bold')
        ax.legend(fontsize=11)
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        return fig, ax

    def __plot_errors__(self, figsize=(10, 6)):
        """Plotea el error absoluto frente a h en escala log-log."""
        fig, ax = plt.subplots(figsize=figsize)

        for name, study in self.studies.items():
            if study.errors is None:
                continue
            # log scale cannot show exact (zero-error) estimates
            mask = study.errors > 0
            label = name if study.observed_order is None else f"{name} (p≈{study.observed_order:.2f})"
            ax.loglog(study.widths[mask], study.errors[mask], marker='o', label=label, linewidth=2)

        ax.set_xlabel('Ancho h', fontsize=12)
        ax.set_ylabel('|error|', fontsize=12)
        ax.set_title('Convergencia del error', fontsize=14, fontweight='bold')
        ax.legend(fontsize=11)
        ax.grid(True, which='both', alpha=0.3)

        plt.tight_layout()
        return fig, ax

    def __plot_all__(self, figsize=(15, 6)):
        """Plotea estimaciones y errores en una sola figura."""
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

        for name, study in self.studies.items():
            ax1.plot(study.ns, study.estimates, marker='o', label=name, linewidth=2)
            if study.errors is not None:
                mask = study.errors > 0
                ax2.loglog(study.widths[mask], study.errors[mask], marker='o', label=name, linewidth=2)

        ax1.set_xscale('log')
        ax1.set_xlabel('Subintervalos n', fontsize=11)
        ax1.set_ylabel('Estimación', fontsize=11)
        ax1.set_title('Estimación de la integral', fontsize=12, fontweight='bold')
        ax1.legend(fontsize=10)
        ax1.grid(True, alpha=0.3)

        ax2.set_xlabel('Ancho h', fontsize=11)
        ax2.set_ylabel('|error|', fontsize=11)
        ax2.set_title('Convergencia del error', fontsize=12, fontweight='bold')
        ax2.grid(True, which='both', alpha=0.3)

        plt.tight_layout()
        return fig, np.array([ax1, ax2])

    # Public method to plot the results
    def plot(self, which='all', figsize=None):
        """
        Método principal para plotear.

        Parameters
        ----------
        which : str
            Qué plotear: 'estimates', 'errors', o 'all' (default: 'all')
        figsize : tuple, optional
            Tamaño de la figura. Si None, usa tamaños por defecto.
        """
        if figsize is None:
            figsize_map = {
                'estimates': (10, 6),
                'errors': (10, 6),
                'all': (15, 6)
            }
            figsize = figsize_map.get(which, (10, 6))

        if which == 'estimates':
            return self.__plot_estimates__(figsize)
        elif which == 'errors':
            return self.__plot_errors__(figsize)
        elif which == 'all':
            return self.__plot_all__(figsize)
        else:
            raise ValueError(f"Opción '{which}' no válida. Usa 'estimates', 'errors', o 'all'")
