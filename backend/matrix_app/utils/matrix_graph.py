import graphviz

def build_matrix_graph(matrix, title=None):
    """
    Genera un grafo Graphviz con la matriz dispersa como cuadrícula de nodos.

    Cada elemento almacenado es un nodo conectado a su fila y a su columna.

    Args:
        matrix (SparseMatrix): Matriz a dibujar
        title (str): Texto del nodo cabecera, por defecto 'filas x columnas'

    Returns:
        graphviz.Digraph: Grafo listo para renderizar
    """
    dot = graphviz.Digraph(format='svg')
    dot.attr(rankdir='LR', nodesep='0.7', ranksep='0.7', splines='ortho')
    dot.attr('node', shape='box', style='filled', fontname='Arial')

    dot.node('header', title or f'{matrix.rows} x {matrix.cols}', fillcolor='#f9f9b6', width='2.2', height='0.7')

    used_rows = sorted({r for (r, _c) in matrix.elements})
    used_cols = sorted({c for (_r, c) in matrix.elements})

    # Column nodes (green)
    for col in used_cols:
        dot.node(f'col_{col}', f'C{col}', fillcolor='#b6f9b6', width='1.2', height='0.7')
        dot.edge('header', f'col_{col}')

    # Row nodes (orange)
    for row in used_rows:
        dot.node(f'row_{row}', f'F{row}', fillcolor='#ff9966', width='1.5', height='0.7')
        dot.edge('header', f'row_{row}')

    if used_cols:
        dot.body.append('{rank=same; ' + ' '.join(['header'] + [f'col_{c}' for c in used_cols]) + ';}')

    # Value nodes (white)
    for (row, col), value in matrix.items():
        value_node = f'v_{row}_{col}'
        dot.node(value_node, str(value), fillcolor='white', width='1', height='0.7')
        dot.edge(f'row_{row}', value_node)
        dot.edge(f'col_{col}', value_node)

    return dot

def render_matrix_svg(matrix, title=None):
    """Renderiza la matriz como SVG. Requiere los ejecutables de Graphviz."""
    return build_matrix_graph(matrix, title).pipe(format='svg')
