
def read_exactly(stream, length):
    ret = []
    left = length
    while left > 0:
        data = stream.read(left)
        if not data:
            raise EOFError('read %d, expected %d' % (length - left, length))
        ret.append(data)
        left -= len(data)
    return b''.join(ret)
