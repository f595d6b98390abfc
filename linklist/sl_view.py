import math

from PyQt5.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QFont, QFontMetrics, QPainterPath, QPen
from PyQt5.QtWidgets import (
    QGraphicsItem,
    QGraphicsObject,
    QGraphicsPathItem,
    QGraphicsSimpleTextItem,
)

from core.base_view import BaseStructureView

NODE_GAP = 60
DROP_OFFSET = 110

VISIT_COLOR = QColor("#4fc3f7")
REMOVE_COLOR = QColor("#ff4d4d")
FOUND_COLOR = QColor("#66bb6a")


class LinkedListView(BaseStructureView):
    """
    Draws the chain left to right as [data|next] boxes joined by arrows.

    Every animate_* call receives the model snapshot *after* the operation.
    If a previous animation is still running it is cut short and the scene
    jumps to that snapshot first, so the drawing never drifts from the model.
    """

    def __init__(self, global_ctrl):
        super().__init__(global_ctrl)
        self.node_items = {}  # id -> ListNodeItem
        self.order = []  # node ids in chain order
        self.arrow_items = {}  # (start_id, end_id) -> ArrowItem
        self._pending_nodes = None

        self._head_label = self._create_label("head", "#ff6b3b")
        self._cursor_label = self._create_label("cursor", "#7e57c2")
        self._cursor_id = None
        self._cursor_visible = False

    # ---------- Scene lifecycle ----------

    def reset(self):
        self.stop_animations()
        self._pending_nodes = None
        self.scene.clear()
        self.node_items.clear()
        self.order.clear()
        self.arrow_items.clear()
        self._head_label = self._create_label("head", "#ff6b3b")
        self._cursor_label = self._create_label("cursor", "#7e57c2")
        self.hide_cursor()
        self.fit_view()

    def sync(self, nodes):
        """Redraw the scene from ``nodes`` without animating."""
        self.stop_animations()
        self._pending_nodes = None
        wanted = {info["id"] for info in nodes}

        for node_id in list(self.node_items):
            if node_id not in wanted:
                self.scene.removeItem(self.node_items.pop(node_id))

        for info in nodes:
            item = self.node_items.get(info["id"])
            if item is None:
                item = self._add_node_item(info)
            item.set_value(info["value"])
            item.setOpacity(1.0)
            item.reset_colors()

        self.order = [info["id"] for info in nodes]
        for node_id, pos in self._layout(self.order).items():
            self.node_items[node_id].setPos(pos)
        self._refresh_connectivity()

    # ---------- Operations ----------

    def animate_insert(self, nodes, inserted_id, index):
        self._settle(nodes)
        info = next(node for node in nodes if node["id"] == inserted_id)
        new_order = [node["id"] for node in nodes]

        new_node = self._add_node_item(info)
        targets = self._layout(new_order)
        target = targets[inserted_id]
        new_node.setOpacity(0.0)
        new_node.setPos(QPointF(target.x(), target.y() - DROP_OFFSET))

        # the walk stops on the predecessor, so only ``index`` nodes light up
        traversal = self._build_traversal_anim(self.order[:index])
        shift = self.anim.parallel(*(
            self.anim.move_item(self.node_items[node_id], targets[node_id], duration=450)
            for node_id in self.order
            if self.node_items[node_id].pos() != targets[node_id]
        ))
        drop = self.anim.parallel(
            self.anim.move_item(new_node, target, duration=600),
            self.anim.fade_item(new_node, 0.0, 1.0, duration=600),
        )
        flash = self.anim.flash_brush(
            setter=new_node.setFillColor,
            start_color=new_node.fillColor,
            end_color=REMOVE_COLOR,
            duration=300,
            loops=2,
        )

        seq = self.anim.sequential(traversal, shift, drop, flash)
        self._track_animation(seq, finalizer=lambda: self._finish(nodes))

    def animate_delete(self, nodes, removed_id, index):
        self._settle(nodes)
        target_node = self.node_items.get(removed_id)
        if target_node is None:
            self.sync(nodes)
            return

        predecessor_id = self.order[index - 1] if index > 0 else None
        successor_id = self.order[index + 1] if index + 1 < len(self.order) else None
        new_order = [node["id"] for node in nodes]
        survivors = {node_id: item for node_id, item in self.node_items.items() if node_id != removed_id}
        targets = self._layout(new_order, items=survivors)

        traversal = self._build_traversal_anim(self.order[:index])
        flash = self.anim.flash_brush(
            setter=target_node.setFillColor,
            start_color=target_node.fillColor,
            end_color=REMOVE_COLOR,
            duration=300,
            loops=2,
        )
        flash.finished.connect(
            lambda: self._bypass(predecessor_id, removed_id, successor_id)
        )
        fade = self.anim.fade_item(target_node, 1.0, 0.0, duration=400)
        shift = self.anim.parallel(*(
            self.anim.move_item(survivors[node_id], targets[node_id], duration=450)
            for node_id in new_order
            if survivors[node_id].pos() != targets[node_id]
        ))

        seq = self.anim.sequential(traversal, flash, fade, shift)
        self._track_animation(seq, finalizer=lambda: self._finish(nodes))

    def animate_lookup(self, index):
        """Walk to ``index`` and mark the node found there."""
        self._settle()
        if not 0 <= index < len(self.order):
            return
        target = self.node_items[self.order[index]]
        seq = self.anim.sequential(
            self._build_traversal_anim(self.order[:index]),
            self.anim.flash_brush(
                setter=target.setFillColor,
                start_color=target.fillColor,
                end_color=FOUND_COLOR,
                duration=350,
                loops=2,
            ),
        )
        self._track_animation(seq)

    def animate_search(self, found_index):
        """Linear scan; stops on ``found_index`` or runs off the tail when it is -1."""
        self._settle()
        if found_index == -1:
            self._track_animation(self._build_traversal_anim(self.order))
            return
        self.animate_lookup(found_index)

    # ---------- Iterator cursor ----------

    def show_cursor(self, node_id):
        """Place the cursor marker under ``node_id``, or past the tail when None."""
        self._cursor_id = node_id
        self._cursor_visible = True
        self._update_cursor_label()

    def hide_cursor(self):
        self._cursor_id = None
        self._cursor_visible = False
        self._cursor_label.setVisible(False)

    # ---------- Helpers ----------

    def _settle(self, nodes=None):
        # finish any interrupted operation instantly
        if self._running and self._pending_nodes is not None:
            self.sync(self._pending_nodes)
        elif self._running:
            self.stop_animations()
            for item in self.node_items.values():
                item.reset_colors()
        self._pending_nodes = nodes

    def _finish(self, nodes):
        if self._pending_nodes is nodes:
            self.sync(nodes)

    def _add_node_item(self, info):
        item = ListNodeItem(info["id"], info["value"])
        item.positionChanged.connect(self._refresh_arrow_paths)
        self.scene.addItem(item)
        self.node_items[info["id"]] = item
        return item

    def _layout(self, order, items=None):
        items = self.node_items if items is None else items
        positions = {}
        x = 0.0
        for node_id in order:
            positions[node_id] = QPointF(x, 0.0)
            x += items[node_id].total_width() + NODE_GAP
        return positions

    def _build_traversal_anim(self, node_ids):
        if not node_ids:
            return self.anim.pause(50)
        seq = self.anim.sequential()
        for node_id in node_ids:
            item = self.node_items[node_id]
            seq.addAnimation(
                self.anim.flash_brush(
                    setter=item.setFillColor,
                    start_color=item.fillColor,
                    end_color=VISIT_COLOR,
                    duration=220,
                )
            )
        return seq

    def _bypass(self, predecessor_id, removed_id, successor_id):
        """Drop the removed node's links and draw predecessor → successor."""
        for key in list(self.arrow_items):
            if removed_id in key:
                self.scene.removeItem(self.arrow_items.pop(key))
        if predecessor_id is not None and successor_id is not None:
            arrow = ArrowItem(self.node_items[predecessor_id], self.node_items[successor_id])
            arrow.set_highlight()
            self.scene.addItem(arrow)
            self.arrow_items[(predecessor_id, successor_id)] = arrow
        self.node_items[removed_id].set_tail(False)

    def _refresh_connectivity(self):
        self._rebuild_arrows()
        self._update_tail_markers()
        self._update_head_label()
        self._update_cursor_label()
        self.fit_view()

    def _rebuild_arrows(self):
        for arrow in self.arrow_items.values():
            self.scene.removeItem(arrow)
        self.arrow_items.clear()
        for start_id, end_id in zip(self.order, self.order[1:]):
            arrow = ArrowItem(self.node_items[start_id], self.node_items[end_id])
            self.scene.addItem(arrow)
            self.arrow_items[(start_id, end_id)] = arrow

    def _refresh_arrow_paths(self):
        for arrow in self.arrow_items.values():
            arrow.update_path()
        self._update_head_label()

    def _update_tail_markers(self):
        tail_id = self.order[-1] if self.order else None
        for node_id, item in self.node_items.items():
            item.set_tail(node_id == tail_id)

    def _update_head_label(self):
        if not self.order:
            self._head_label.setVisible(False)
            return
        head_item = self.node_items[self.order[0]]
        top_center = head_item.mapToScene(QPointF(head_item.data_width / 2, 0))
        rect = self._head_label.boundingRect()
        self._head_label.setPos(top_center.x() - rect.width() / 2, top_center.y() - rect.height() - 12)
        self._head_label.setVisible(True)

    def _update_cursor_label(self):
        if not self._cursor_visible:
            return
        item = self.node_items.get(self._cursor_id)
        if item is not None:
            anchor = item.mapToScene(QPointF(item.data_width / 2, ListNodeItem.height))
            self._cursor_label.setText("cursor")
        elif self.order:
            tail = self.node_items[self.order[-1]]
            anchor = tail.mapToScene(QPointF(tail.total_width() + NODE_GAP / 2, ListNodeItem.height))
            self._cursor_label.setText("cursor → NULL")
        else:
            anchor = QPointF(0, ListNodeItem.height)
            self._cursor_label.setText("cursor → NULL")
        rect = self._cursor_label.boundingRect()
        self._cursor_label.setPos(anchor.x() - rect.width() / 2, anchor.y() + 12)
        self._cursor_label.setVisible(True)

    def _create_label(self, text, color):
        label = QGraphicsSimpleTextItem(text)
        label.setBrush(QColor(color))
        font = label.font()
        font.setBold(True)
        label.setFont(font)
        label.setZValue(50)
        label.setVisible(False)
        self.scene.addItem(label)
        return label


class ListNodeItem(QGraphicsObject):
    """Two-part box: element on the left, ``next`` slot on the right."""

    positionChanged = pyqtSignal()

    height = 50
    pointer_size = height
    data_base_width = 90

    default_fill = QColor("#e9e9ef")
    default_stroke = QColor("#4a4a52")

    def __init__(self, node_id, value):
        super().__init__()
        self.node_id = node_id
        self._value = str(value)
        self.fillColor = QColor(self.default_fill)
        self.strokeColor = QColor(self.default_stroke)
        self.textColor = QColor("#1f1f24")
        self.data_width = self.data_base_width
        self._label_font = QFont()
        self._label_font.setPointSize(14)
        self._is_tail = False

        self.setFlags(QGraphicsItem.ItemSendsGeometryChanges)
        self._adjust_data_width()

    def boundingRect(self):
        return QRectF(0, 0, self.total_width(), self.height)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)

        painter.setPen(QPen(self.strokeColor, 2.2))
        painter.setBrush(QBrush(self.fillColor))
        painter.drawRect(self.boundingRect())
        painter.setPen(QPen(self.strokeColor, 1.8))
        painter.drawLine(
            QPointF(self.data_width, 1.0),
            QPointF(self.data_width, self.height - 1.0),
        )

        painter.setFont(self._label_font)
        painter.setPen(self.textColor)
        text_rect = QRectF(0, 0, self.data_width, self.height).adjusted(10, 0, -10, 0)
        painter.drawText(text_rect, Qt.AlignCenter, self._value)

        if self._is_tail:
            tail_font = QFont(self._label_font)
            tail_font.setPointSize(7)
            tail_font.setBold(True)
            painter.setFont(tail_font)
            painter.setPen(self.strokeColor)
            painter.drawText(self.pointer_rect().adjusted(4, 4, -4, -4), Qt.AlignCenter, "NULL")

    def set_value(self, value):
        value = str(value)
        if value != self._value:
            self._value = value
            self._adjust_data_width()
            self.update()

    def setFillColor(self, color: QColor):
        self.fillColor = QColor(color)
        self.update()

    def reset_colors(self):
        self.fillColor = QColor(self.default_fill)
        self.strokeColor = QColor(self.default_stroke)
        self.update()

    def set_tail(self, is_tail: bool):
        if self._is_tail != is_tail:
            self._is_tail = is_tail
            self.update()

    def total_width(self):
        return self.data_width + self.pointer_size

    def pointer_rect(self):
        return QRectF(self.data_width, 0, self.pointer_size, self.pointer_size)

    def pointer_center(self):
        return QPointF(self.data_width + self.pointer_size / 2.0, self.height / 2.0)

    def entry_point(self):
        return QPointF(0.0, self.height / 2.0)

    def itemChange(self, change, value):
        if change == QGraphicsItem.ItemPositionHasChanged:
            self.positionChanged.emit()
        return super().itemChange(change, value)

    def _adjust_data_width(self):
        metrics = QFontMetrics(self._label_font)
        required = metrics.horizontalAdvance(self._value) + 32
        new_width = max(self.data_base_width, required)
        if new_width != self.data_width:
            self.prepareGeometryChange()
            self.data_width = new_width


class ArrowItem(QGraphicsPathItem):
    """``next`` link from the pointer slot of one node to the left edge of another."""

    def __init__(self, start_item: ListNodeItem, end_item: ListNodeItem):
        super().__init__()
        self.start_item = start_item
        self.end_item = end_item

        pen = QPen(QColor("#ff8c00"), 3)
        pen.setCapStyle(Qt.RoundCap)
        pen.setJoinStyle(Qt.RoundJoin)
        self._default_pen = QPen(pen)
        self.setPen(QPen(self._default_pen))
        self.setZValue(5)
        self.update_path()

    def set_highlight(self, color="#ff1744", width=5):
        pen = QPen(self._default_pen)
        pen.setColor(QColor(color))
        pen.setWidthF(width)
        self.setPen(pen)

    def update_path(self):
        start = self.start_item.mapToScene(self.start_item.pointer_center())
        end = self.end_item.mapToScene(self.end_item.entry_point())

        path = QPainterPath(start)
        if abs(start.y() - end.y()) < 1.0 and end.x() > start.x():
            path.lineTo(end)
        else:
            # curve over anything sitting between the two nodes
            ctrl = QPointF((start.x() + end.x()) / 2.0, min(start.y(), end.y()) - 70)
            path.quadTo(ctrl, end)
        path.addPath(self._arrow_head(path))
        self.setPath(path)

    @staticmethod
    def _arrow_head(path: QPainterPath, length=14, angle_deg=26) -> QPainterPath:
        tip = path.pointAtPercent(1.0)
        tangent = path.angleAtPercent(1.0)
        head = QPainterPath()
        for sign in (-1, 1):
            angle = math.radians(tangent + 180 + sign * angle_deg)
            head.moveTo(tip)
            head.lineTo(tip.x() + length * math.cos(angle), tip.y() - length * math.sin(angle))
        return head
